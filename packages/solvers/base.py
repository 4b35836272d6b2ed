from __future__ import annotations
import random
from typing import Dict, Type

# ---- Global solver registry ----
REGISTRY: Dict[str, Type["BaseSolver"]] = {}


def register(cls: Type["BaseSolver"]) -> Type["BaseSolver"]:
    """
    Decorator: @register on a solver class adds it to REGISTRY by its `id`.
    """
    sid = getattr(cls, "id", None)
    if not sid:
        raise ValueError(f"{cls.__name__} must define a non-empty `id`")
    if sid in REGISTRY:
        raise ValueError(f"Duplicate solver id: {sid}")
    REGISTRY[sid] = cls
    return cls


# ---- Base class that solvers inherit ----
class BaseSolver:
    """
    An automated player. The harness calls reset() once per game, then
    next_guess(state) every turn; the returned identifier is typed into the
    session key by key.

    state keys:
      - "turn":      1-based turn number
      - "history":   list of (guess, GuessResult) so far
      - "remaining": attempts left including this one
      - "rng":       the solver's random.Random
    """
    id = "base"
    name = "Base"
    version = "0.0.0"

    def __init__(self):
        self.rng = random.Random()

    def reset(self, *, seed: int | None = None) -> None:
        if seed is not None:
            self.rng.seed(seed)

    def next_guess(self, state: dict) -> str:
        raise NotImplementedError("Override in subclass")
