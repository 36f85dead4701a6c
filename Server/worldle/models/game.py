"""
Game Data Models

Contains all game-related data structures and enums.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, List, Optional


class LetterStatus(Enum):
    """Per-letter feedback after a guess. UNUSED is only used for keypad keys."""
    CORRECT_POSITION = "CORRECT_POSITION"
    PRESENT_WRONG_POSITION = "PRESENT_WRONG_POSITION"
    ABSENT = "ABSENT"
    UNUSED = "UNUSED"


# Keypad keys only ever move up this ranking
STATUS_PRIORITY: Dict[LetterStatus, int] = {
    LetterStatus.UNUSED: 0,
    LetterStatus.ABSENT: 1,
    LetterStatus.PRESENT_WRONG_POSITION: 2,
    LetterStatus.CORRECT_POSITION: 3,
}


class EnginePhase(Enum):
    """Where the engine is in its turn cycle."""
    ENTERING = "ENTERING"
    VALIDATING = "VALIDATING"
    RESOLVED = "RESOLVED"


class GameOutcome(Enum):
    IN_PROGRESS = "IN_PROGRESS"
    WON = "WON"
    LOST = "LOST"


class SubmitResult(Enum):
    """What a row submission did."""
    NOT_ENOUGH_LETTERS = "NOT_ENOUGH_LETTERS"
    NOT_IN_DICTIONARY = "NOT_IN_DICTIONARY"
    VALIDATION_UNAVAILABLE = "VALIDATION_UNAVAILABLE"
    CONTINUE = "CONTINUE"
    WON = "WON"
    LOST = "LOST"
    IGNORED = "IGNORED"


@dataclass
class BoardSnapshot:
    """Client-facing view of one game, safe to serialize with asdict()."""
    grid: List[List[str]]
    current_row: int
    current_col: int
    classifications: List[List[str]]  # one entry per submitted row
    key_status: Dict[str, str]
    outcome: str
    max_rounds: int
    word_length: int
    attempts: int = 0
    solution: Optional[str] = None  # Only included once the game is resolved
    used_letters: List[str] = field(default_factory=list)
