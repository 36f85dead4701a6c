"""
Game Service

Keeps one game engine per connected client and routes that client's input
to it.
"""

import threading
from datetime import date
from typing import Callable, Dict, Optional

from ..models.renderer import Renderer
from .dictionary import DictionaryValidator
from .game_engine import GameEngine
from .input_router import Command, InputAction, dispatch
from .word_provider import WordProvider


class GameSession:
    """An engine plus the lock that keeps one client's input serialized."""

    def __init__(self, engine: GameEngine):
        self.engine = engine
        self._lock = threading.Lock()
        self._submitting = threading.Event()

    def handle(self, command: Optional[Command]):
        """
        Apply a command after any edit already in progress.

        Input that arrives while a submission is waiting on the dictionary is
        dropped rather than queued behind it; other commands wait their turn.
        """
        if command is None or self._submitting.is_set():
            return None

        is_submit = command[0] == InputAction.SUBMIT
        with self._lock:
            if is_submit:
                self._submitting.set()
            try:
                return dispatch(self.engine, command)
            finally:
                if is_submit:
                    self._submitting.clear()


class GameService:
    """
    Game session manager.

    This class handles:
    - Resolving today's solution when a client connects
    - One engine per client, discarded when the client goes away
    - Serializing each client's input
    """

    def __init__(self, word_provider: WordProvider, validator: DictionaryValidator,
                 today: Callable[[], date] = date.today):
        self.word_provider = word_provider
        self.validator = validator
        self.today = today
        self.games: Dict[str, GameSession] = {}

    def create_game(self, session_id: str, renderer: Renderer) -> GameEngine:
        """
        Start a game for `session_id`, replacing any previous one.

        Raises:
            SolutionUnavailableError: If today's word can't be resolved
        """
        solution = self.word_provider.get_solution(self.today())
        engine = GameEngine(solution, self.validator, renderer)
        self.games[session_id] = GameSession(engine)
        return engine

    def get_game(self, session_id: str) -> Optional[GameEngine]:
        session = self.games.get(session_id)
        return session.engine if session else None

    def handle_input(self, session_id: str, command: Optional[Command]):
        """Route a translated command; returns None if there is no game for the session."""
        session = self.games.get(session_id)
        if session is None:
            return None
        return session.handle(command)

    def end_game(self, session_id: str) -> bool:
        """
        Removes a session's game from memory.

        Returns:
            bool: True if a game was removed, False if not found
        """
        return self.games.pop(session_id, None) is not None


# Global service instance
_game_service = None


def get_game_service() -> Optional[GameService]:
    """Get the global game service instance."""
    return _game_service


def initialize_game_service(word_provider: WordProvider, validator: DictionaryValidator) -> GameService:
    """Initialize the global game service instance."""
    global _game_service
    _game_service = GameService(word_provider, validator)
    return _game_service
