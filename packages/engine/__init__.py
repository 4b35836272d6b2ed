from .scoring import Mark, score, to_pattern
from .constraints import is_consistent, slot_mask, required_counts
from .validation import validate_guess
from .identifier import generate
from .session import (
    GameConfig, Session, Status, new_game, press_key, reset, submit, type_guess,
)
from .errors import EngineError, GameOver, IncompleteGuess

__all__ = [
    "Mark", "score", "to_pattern",
    "is_consistent", "slot_mask", "required_counts",
    "validate_guess", "generate",
    "GameConfig", "Session", "Status", "new_game", "press_key", "reset", "submit", "type_guess",
    "EngineError", "GameOver", "IncompleteGuess",
]
