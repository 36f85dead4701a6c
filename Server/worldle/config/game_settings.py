"""
Game Configuration Constants Module

This module defines the rules of the puzzle: board dimensions, the keypad
layout, player-facing messages and how long they stay on screen. The offline
dictionary used by the word-list validator is loaded and validated here too.
"""

import json
import os
from typing import FrozenSet, List, Final, Tuple

# Board dimensions
WORD_LENGTH: Final[int] = 5
"""Letters per guess (columns of the grid)."""

MAX_ROUNDS: Final[int] = 6
"""
Maximum number of guess attempts allowed per game (rows of the grid).
The game is lost after this many valid, non-winning guesses.
"""

# On-screen keypad, top to bottom. Blank strings are layout filler only.
KEYPAD_LAYOUT: Final[Tuple[Tuple[str, ...], ...]] = (
    ('Q', 'W', 'E', 'R', 'T', 'Y', 'U', 'I', 'O', 'P'),
    ('A', 'S', 'D', 'F', 'G', 'H', 'J', 'K', 'L', ''),
    ('GO', 'Z', 'X', 'C', 'V', 'B', 'N', 'M', 'DEL', ''),
)
SUBMIT_KEY: Final[str] = 'GO'
DELETE_KEY: Final[str] = 'DEL'

# Player-facing messages
MSG_NOT_ENOUGH_LETTERS: Final[str] = 'Not enough letters'
MSG_NOT_IN_DICTIONARY: Final[str] = 'Not in dictionary'
MSG_DICTIONARY_UNAVAILABLE: Final[str] = 'Dictionary unavailable, please try again'
MSG_GAME_UNAVAILABLE: Final[str] = "Today's puzzle is unavailable"

# Message display durations in milliseconds
REJECTION_DURATION_MS: Final[int] = 1000
UNAVAILABLE_DURATION_MS: Final[int] = 2000
WIN_DURATION_MS: Final[int] = 3000
LOSS_DURATION_MS: Final[int] = 5000


def win_message(attempts: int) -> str:
    noun = 'attempt' if attempts == 1 else 'attempts'
    return f"Congrats! You guessed it in {attempts} {noun}."


def loss_message(solution: str) -> str:
    return f"Sorry you ran out of all attempts. The word is {solution}."


def _load_word_list() -> List[str]:
    """
    Load the offline dictionary from wordles.json.

    Returns:
        List[str]: List of uppercase 5-letter words

    Raises:
        FileNotFoundError: If wordles.json file is not found
        ValueError: If the JSON is malformed, empty or contains invalid words
    """
    config_dir = os.path.dirname(os.path.abspath(__file__))
    json_file_path = os.path.join(config_dir, 'wordles.json')

    try:
        with open(json_file_path, 'r', encoding='utf-8') as f:
            word_list = json.load(f)
    except FileNotFoundError:
        raise FileNotFoundError(f"Word list file not found: {json_file_path}")
    except json.JSONDecodeError as e:
        raise ValueError(f"Invalid JSON in wordles.json: {e}")

    if not isinstance(word_list, list):
        raise ValueError("JSON file must contain an array of words")

    if not word_list:
        raise ValueError("Word list cannot be empty")

    uppercase_words = [word.upper() for word in word_list]

    for word in uppercase_words:
        if len(word) != WORD_LENGTH:
            raise ValueError(f"Word '{word}' is not {WORD_LENGTH} characters long")
        if not word.isalpha():
            raise ValueError(f"Word '{word}' contains non-alphabetic characters")

    return uppercase_words


# Offline dictionary loaded from JSON file
WORD_LIST: Final[List[str]] = _load_word_list()
WORD_SET: Final[FrozenSet[str]] = frozenset(WORD_LIST)


def validate_word_list_integrity() -> bool:
    """
    Validates the integrity and consistency of the offline dictionary.

    Returns:
        bool: True if word list passes all validation checks

    Raises:
        ValueError: If any validation check fails with detailed error message
    """
    if not WORD_LIST:
        raise ValueError("Word list cannot be empty")

    for index, word in enumerate(WORD_LIST):
        if len(word) != WORD_LENGTH:
            raise ValueError(f"Word at index {index} '{word}' is not {WORD_LENGTH} characters long")

        if not word.isalpha():
            raise ValueError(f"Word at index {index} '{word}' contains non-alphabetic characters")

        if not word.isupper():
            raise ValueError(f"Word at index {index} '{word}' is not in uppercase format")

    if len(WORD_LIST) != len(WORD_SET):
        duplicates = sorted({word for word in WORD_LIST if WORD_LIST.count(word) > 1})
        raise ValueError(f"Duplicate words found in word list: {duplicates}")

    return True


if __name__ == "__main__":

    try:
        validate_word_list_integrity()
        print(f" Word list validation passed ({len(WORD_LIST)} words)")
    except ValueError as config_error:
        print(f" Configuration validation failed: {config_error}")
        exit(1)
