"""
Socket.IO Renderer

Forwards engine notifications to the browser tab that owns the game.
"""

from typing import List

from ..models.game import GameOutcome, LetterStatus
from ..models.renderer import Renderer
from ..utils.game_logger import game_logger
from ..utils.helpers import serialize_statuses


class SocketIORenderer(Renderer):
    """Emits one Socket.IO event per engine callback, addressed to a single session."""

    def __init__(self, socketio, sid: str):
        self.socketio = socketio
        self.sid = sid

    def _emit(self, event: str, payload: dict) -> None:
        self.socketio.emit(event, payload, to=self.sid)

    def on_cell_updated(self, row: int, col: int, letter: str) -> None:
        self._emit('cell_updated', {'row': row, 'col': col, 'letter': letter})

    def on_classification(self, row: int, classifications: List[LetterStatus]) -> None:
        self._emit('classification', {
            'row': row,
            'classifications': serialize_statuses(classifications),
        })

    def on_key_status(self, letter: str, status: LetterStatus) -> None:
        self._emit('key_status', {'letter': letter, 'status': status.value})

    def on_message(self, text: str, duration_ms: int) -> None:
        self._emit('notice', {'text': text, 'duration_ms': duration_ms})

    def on_shake(self, row: int) -> None:
        self._emit('shake', {'row': row})

    def on_game_over(self, outcome: GameOutcome, attempts: int, solution: str) -> None:
        event = 'game_won' if outcome == GameOutcome.WON else 'game_lost'
        game_logger.log_game_event(self.sid, event, attempts=attempts, solution=solution)
        self._emit('game_over', {
            'outcome': outcome.value,
            'attempts': attempts,
            'solution': solution,
        })
