"""
Services Package

Contains all business logic and service classes.
"""

from .dictionary import DictionaryApiValidator, DictionaryValidator, WordListValidator
from .exceptions import DictionaryUnavailableError, SolutionUnavailableError, WorldleError
from .game_engine import GameEngine, classify
from .game_service import GameService, get_game_service, initialize_game_service
from .word_provider import HttpWordProvider, JsonFileWordProvider, WordProvider

__all__ = [
    'DictionaryApiValidator', 'DictionaryValidator', 'WordListValidator',
    'DictionaryUnavailableError', 'SolutionUnavailableError', 'WorldleError',
    'GameEngine', 'classify',
    'GameService', 'get_game_service', 'initialize_game_service',
    'HttpWordProvider', 'JsonFileWordProvider', 'WordProvider'
]
