"""
Service Exceptions

Errors raised by the game's external collaborators.
"""


class WorldleError(Exception):
    """Base class for all game errors."""


class SolutionUnavailableError(WorldleError):
    """No solution could be resolved for the requested day."""


class DictionaryUnavailableError(WorldleError):
    """The dictionary could not say whether a word exists."""
