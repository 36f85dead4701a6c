"""
Keypad Model

The on-screen keypad as a sparse mapping from key label to its handle.
Blank filler cells in the layout take up no entry at all.
"""

from dataclasses import dataclass, asdict
from typing import Dict, Iterator, List, Optional, Sequence

from ..config.game_settings import KEYPAD_LAYOUT, SUBMIT_KEY, DELETE_KEY


@dataclass(frozen=True)
class KeyHandle:
    """One key and where it sits on the CSS grid (1-based, end exclusive)."""
    label: str
    row: int
    column_start: int
    column_end: int

    @property
    def is_letter(self) -> bool:
        return len(self.label) == 1 and self.label.isalpha()


class Keypad:
    """
    Sparse keypad built from a row layout.

    Letter rows use two grid columns per key; the middle row is shifted one
    column right, and the submit/delete keys on the bottom row are three
    columns wide.
    """

    WIDE_KEYS = (SUBMIT_KEY, DELETE_KEY)

    def __init__(self, layout: Sequence[Sequence[str]] = KEYPAD_LAYOUT):
        self._keys: Dict[str, KeyHandle] = {}
        self._rows: List[List[str]] = []

        last_row = len(layout) - 1
        for row_index, row in enumerate(layout):
            labels = []
            column = 1 if row_index in (0, last_row) else 2
            for label in row:
                width = 3 if label in self.WIDE_KEYS else 2
                if label:
                    if label in self._keys:
                        raise ValueError(f"Duplicate keypad label '{label}'")
                    self._keys[label] = KeyHandle(
                        label=label,
                        row=row_index + 1,
                        column_start=column,
                        column_end=column + width,
                    )
                    labels.append(label)
                column += width
            self._rows.append(labels)

    def __contains__(self, label: str) -> bool:
        return label in self._keys

    def __getitem__(self, label: str) -> KeyHandle:
        return self._keys[label]

    def __iter__(self) -> Iterator[KeyHandle]:
        return iter(self._keys.values())

    def __len__(self) -> int:
        return len(self._keys)

    def get(self, label: str) -> Optional[KeyHandle]:
        return self._keys.get(label)

    @property
    def rows(self) -> List[List[str]]:
        return [list(row) for row in self._rows]

    def letters(self) -> List[str]:
        return [handle.label for handle in self if handle.is_letter]

    def to_dict(self) -> Dict:
        return {
            'rows': self.rows,
            'keys': [asdict(handle) for handle in self],
        }
