"""
Input Router

Physical keyboard events and on-screen keypad presses both end up as one of
three engine operations. This module does the translation.
"""

from enum import Enum
from typing import Optional, Tuple

from ..config.game_settings import SUBMIT_KEY, DELETE_KEY


class InputAction(Enum):
    APPEND = "APPEND"
    DELETE = "DELETE"
    SUBMIT = "SUBMIT"


Command = Tuple[InputAction, Optional[str]]


def _letter(value: str) -> Optional[str]:
    if len(value) == 1 and value.isascii() and value.isalpha():
        return value.upper()
    return None


def from_keyboard(key: Optional[str] = None, code: Optional[str] = None) -> Optional[Command]:
    """
    Translate a browser keyboard event.

    Letters come from `KeyboardEvent.key`, so the player's keyboard layout
    decides which letter a key types. `KeyboardEvent.code` is only consulted
    for Enter and Backspace. Anything else is ignored.
    """
    for value in (key, code):
        if value in ('Enter', 'NumpadEnter'):
            return InputAction.SUBMIT, None
        if value == 'Backspace':
            return InputAction.DELETE, None
    letter = _letter(key) if key else None
    if letter:
        return InputAction.APPEND, letter
    return None


def from_keypad(label: Optional[str]) -> Optional[Command]:
    """Translate an on-screen key label. Blank or unknown labels are ignored."""
    if not label:
        return None
    if label == SUBMIT_KEY:
        return InputAction.SUBMIT, None
    if label == DELETE_KEY:
        return InputAction.DELETE, None
    letter = _letter(label)
    if letter:
        return InputAction.APPEND, letter
    return None


def dispatch(engine, command: Optional[Command]):
    """
    Run a translated command against an engine.

    Returns the engine's SubmitResult for submissions, a bool for edits, and
    None when there was nothing to do.
    """
    if command is None:
        return None
    action, letter = command
    if action == InputAction.APPEND:
        return engine.append_letter(letter)
    if action == InputAction.DELETE:
        return engine.delete_letter()
    if action == InputAction.SUBMIT:
        return engine.submit_row()
    raise ValueError(f"Unknown input action {action!r}")
