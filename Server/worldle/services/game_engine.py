"""
Game Engine

Owns one puzzle: the solution, the grid of guesses, the cursor and the keypad
feedback. Input operations mutate the grid; a row submission asks the
dictionary, scores the guess and reports everything to a Renderer.
"""

import logging
from collections import Counter
from typing import Dict, List, Optional, Set

from ..config.game_settings import (
    WORD_LENGTH, MAX_ROUNDS,
    MSG_NOT_ENOUGH_LETTERS, MSG_NOT_IN_DICTIONARY, MSG_DICTIONARY_UNAVAILABLE,
    REJECTION_DURATION_MS, UNAVAILABLE_DURATION_MS, WIN_DURATION_MS, LOSS_DURATION_MS,
    win_message, loss_message,
)
from ..models.game import (
    BoardSnapshot, EnginePhase, GameOutcome, LetterStatus, SubmitResult, STATUS_PRIORITY
)
from ..models.renderer import Renderer
from .dictionary import DictionaryValidator
from .exceptions import DictionaryUnavailableError

logger = logging.getLogger(__name__)


def classify(solution: str, guess: str) -> List[LetterStatus]:
    """
    Implements the Wordle letter evaluation algorithm.

    Exact matches are scored first and consume their letter from the
    solution's counts; the remaining positions are then scored left to right,
    each taking one remaining occurrence if any is left. A letter is never
    reported (correct or present) more times than it occurs in the solution.
    """
    if len(solution) != len(guess):
        raise ValueError(
            f"Guess length {len(guess)} does not match solution length {len(solution)}"
        )

    remaining = Counter(solution)
    result: List[Optional[LetterStatus]] = [None] * len(guess)

    # First pass: exact position matches
    for i, letter in enumerate(guess):
        if letter == solution[i]:
            result[i] = LetterStatus.CORRECT_POSITION
            remaining[letter] -= 1

    # Second pass: misplaced letters and misses
    for i, letter in enumerate(guess):
        if result[i] is not None:
            continue
        if remaining[letter] > 0:
            result[i] = LetterStatus.PRESENT_WRONG_POSITION
            remaining[letter] -= 1
        else:
            result[i] = LetterStatus.ABSENT

    return result  # type: ignore[return-value]


class GameEngine:
    """
    Single-player puzzle state machine.

    Phases: ENTERING (typing allowed) -> VALIDATING (dictionary check in
    flight, input ignored) -> back to ENTERING, or RESOLVED on a win or after
    the last row. RESOLVED is terminal.
    """

    def __init__(self,
                 solution: str,
                 validator: DictionaryValidator,
                 renderer: Optional[Renderer] = None,
                 max_rounds: int = MAX_ROUNDS,
                 word_length: int = WORD_LENGTH):
        solution = solution.strip().upper()
        if len(solution) != word_length or not (solution.isascii() and solution.isalpha()):
            raise ValueError(f"Solution must be {word_length} letters, got '{solution}'")

        self.word_length = word_length
        self.max_rounds = max_rounds
        self._solution = solution
        self.validator = validator
        self.renderer = renderer or Renderer()

        self.grid: List[List[str]] = [[''] * word_length for _ in range(max_rounds)]
        self.current_row = 0
        self.current_col = 0
        self.used_letters: Set[str] = set()
        self.key_status: Dict[str, LetterStatus] = {}
        self.row_results: List[List[LetterStatus]] = []
        self.phase = EnginePhase.ENTERING
        self._won = False

    @property
    def solution(self) -> str:
        return self._solution

    @property
    def outcome(self) -> GameOutcome:
        if self.phase != EnginePhase.RESOLVED:
            return GameOutcome.IN_PROGRESS
        return GameOutcome.WON if self._won else GameOutcome.LOST

    @property
    def attempts(self) -> int:
        """Number of valid guesses scored so far."""
        return len(self.row_results)

    def current_word(self) -> str:
        return ''.join(self.grid[self.current_row])

    # Input operations

    def append_letter(self, letter: str) -> bool:
        """Write a letter at the cursor. Returns True if the grid changed."""
        if self.phase != EnginePhase.ENTERING:
            return False
        if not isinstance(letter, str) or len(letter) != 1 or not (letter.isascii() and letter.isalpha()):
            return False
        if self.current_col >= self.word_length:
            return False

        letter = letter.upper()
        row, col = self.current_row, self.current_col
        self.grid[row][col] = letter
        self.current_col += 1
        self.renderer.on_cell_updated(row, col, letter)
        return True

    def delete_letter(self) -> bool:
        """Clear the last letter of the current row. Returns True if the grid changed."""
        if self.phase != EnginePhase.ENTERING or self.current_col == 0:
            return False

        self.current_col -= 1
        self.grid[self.current_row][self.current_col] = ''
        self.renderer.on_cell_updated(self.current_row, self.current_col, '')
        return True

    def submit_row(self) -> SubmitResult:
        """Validate and score the current row."""
        if self.phase != EnginePhase.ENTERING:
            return SubmitResult.IGNORED

        row = self.current_row
        if self.current_col < self.word_length:
            self.renderer.on_shake(row)
            self.renderer.on_message(MSG_NOT_ENOUGH_LETTERS, REJECTION_DURATION_MS)
            return SubmitResult.NOT_ENOUGH_LETTERS

        word = self.current_word()
        self.phase = EnginePhase.VALIDATING
        try:
            is_word = self.validator.is_valid_word(word)
        except DictionaryUnavailableError as e:
            logger.warning("Dictionary unavailable while checking %s: %s", word, e)
            self.phase = EnginePhase.ENTERING
            self.renderer.on_message(MSG_DICTIONARY_UNAVAILABLE, UNAVAILABLE_DURATION_MS)
            return SubmitResult.VALIDATION_UNAVAILABLE
        except Exception:
            self.phase = EnginePhase.ENTERING
            raise

        if not is_word:
            self.phase = EnginePhase.ENTERING
            self.renderer.on_shake(row)
            self.renderer.on_message(MSG_NOT_IN_DICTIONARY, REJECTION_DURATION_MS)
            return SubmitResult.NOT_IN_DICTIONARY

        classifications = classify(self._solution, word)
        self.row_results.append(classifications)
        self._update_keypad(word, classifications)
        self.renderer.on_classification(row, list(classifications))

        attempts = row + 1
        if word == self._solution:
            self._won = True
            self.phase = EnginePhase.RESOLVED
            self.renderer.on_message(win_message(attempts), WIN_DURATION_MS)
            self.renderer.on_game_over(GameOutcome.WON, attempts, self._solution)
            return SubmitResult.WON

        if attempts >= self.max_rounds:
            self.phase = EnginePhase.RESOLVED
            self.renderer.on_message(loss_message(self._solution), LOSS_DURATION_MS)
            self.renderer.on_game_over(GameOutcome.LOST, attempts, self._solution)
            return SubmitResult.LOST

        self.current_row += 1
        self.current_col = 0
        self.phase = EnginePhase.ENTERING
        return SubmitResult.CONTINUE

    def _update_keypad(self, word: str, classifications: List[LetterStatus]) -> None:
        """Move keypad keys up in status and record letters not in the solution."""
        for letter, status in zip(word, classifications):
            if status not in STATUS_PRIORITY:
                raise ValueError(f"Unknown letter status {status!r}")

            if status == LetterStatus.ABSENT and letter not in self._solution:
                self.used_letters.add(letter)

            current = self.key_status.get(letter, LetterStatus.UNUSED)
            if STATUS_PRIORITY[status] > STATUS_PRIORITY[current]:
                self.key_status[letter] = status
                self.renderer.on_key_status(letter, status)

    def snapshot(self) -> BoardSnapshot:
        """Serializable view of the board. The solution is hidden until resolved."""
        resolved = self.phase == EnginePhase.RESOLVED
        return BoardSnapshot(
            grid=[list(row) for row in self.grid],
            current_row=self.current_row,
            current_col=self.current_col,
            classifications=[[status.value for status in row] for row in self.row_results],
            key_status={letter: status.value for letter, status in self.key_status.items()},
            outcome=self.outcome.value,
            max_rounds=self.max_rounds,
            word_length=self.word_length,
            attempts=self.attempts,
            solution=self._solution if resolved else None,
            used_letters=sorted(self.used_letters),
        )
