"""
Data Models Package

Contains all data models and schemas used throughout the application.
"""

from .game import BoardSnapshot, EnginePhase, GameOutcome, LetterStatus, SubmitResult
from .keypad import KeyHandle, Keypad
from .renderer import Renderer

__all__ = [
    'BoardSnapshot', 'EnginePhase', 'GameOutcome', 'LetterStatus', 'SubmitResult',
    'KeyHandle', 'Keypad', 'Renderer'
]
