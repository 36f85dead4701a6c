"""
Renderer Interface

The notifications a game engine sends to whatever is drawing the board.
"""

from typing import List

from .game import GameOutcome, LetterStatus


class Renderer:
    """
    Base renderer. Every callback is a no-op so a subclass only overrides the
    notifications it cares about.
    """

    def on_cell_updated(self, row: int, col: int, letter: str) -> None:
        """A grid cell now shows `letter` ('' when cleared)."""

    def on_classification(self, row: int, classifications: List[LetterStatus]) -> None:
        """A submitted row has been scored, one status per column."""

    def on_key_status(self, letter: str, status: LetterStatus) -> None:
        """A keypad key moved up to a new status."""

    def on_message(self, text: str, duration_ms: int) -> None:
        """Show a transient message for `duration_ms` milliseconds."""

    def on_shake(self, row: int) -> None:
        """The submission of `row` was rejected."""

    def on_game_over(self, outcome: GameOutcome, attempts: int, solution: str) -> None:
        """The game has been resolved."""
