"""
Engine error taxonomy.

All of these are recoverable by the player. Invalid keys are not errors at
all: press_key ignores them silently.
"""


class EngineError(Exception):
    """Base class for game engine errors."""


class IncompleteGuess(EngineError):
    """Submit attempted before the guess fills all 36 positions."""

    def __init__(self, length: int):
        self.length = length
        super().__init__(f"UUID must be complete (have {length} of 36 characters)")


class GameOver(EngineError):
    """Submit attempted on a session that is already won or lost."""
