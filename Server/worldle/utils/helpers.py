"""
Helper Functions

Contains utility functions used throughout the application.
"""

from dataclasses import asdict
from typing import Any, Dict, List


def serialize_statuses(statuses) -> List[str]:
    """Turn a row of LetterStatus values into JSON-friendly strings."""
    return [status.value for status in statuses]


def board_payload(engine) -> Dict[str, Any]:
    """The 'board' event body for an engine."""
    return {'board': asdict(engine.snapshot())}
