"""
Utilities Package

Contains utility functions and helper modules.
"""

from .helpers import board_payload, serialize_statuses
from .game_logger import game_logger

__all__ = ['board_payload', 'serialize_statuses', 'game_logger']
