"""
Random Hex solver.

Strategy:
  - Ignore all feedback and guess a fresh uniformly random identifier.

Notes:
  - Deterministic across runs with the same seed (via BaseSolver.rng).
  - This is a baseline to verify the pipeline; with 16**32 possible targets
    it essentially never wins.
"""

from __future__ import annotations

from packages.engine.identifier import generate
from .base import BaseSolver, register


@register
class RandomHexSolver(BaseSolver):
    id = "random_hex"
    name = "Random Hex"
    version = "1.0.0"

    def next_guess(self, state: dict) -> str:
        return generate(self.rng)
