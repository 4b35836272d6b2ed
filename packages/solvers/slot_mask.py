"""
Slot Mask solver.

Idea:
  Keep a (32, 16) mask of digits still possible at each hex slot, derived
  from all feedback so far (see engine.constraints.slot_mask).
  - Slots pinned by a CORRECT mark keep their digit.
  - Digits known to be present (required_counts) get placed into open slots
    that still allow them.
  - Every other open slot samples uniformly among its remaining digits.

Every guess removes the tried digit from each open slot, so a slot is solved
after at most 16 guesses and the whole identifier within 16 turns.
"""

from __future__ import annotations

from typing import List

import numpy as np

from packages.engine.constraints import required_counts, slot_mask
from packages.engine.identifier import HEX_DIGITS, HYPHEN, SEGMENTS
from .base import BaseSolver, register


@register
class SlotMaskSolver(BaseSolver):
    id = "slot_mask"
    name = "Slot Mask"
    version = "1.0.0"

    def _choose_digits(self, mask: np.ndarray, req: np.ndarray) -> List[int]:
        n_slots = mask.shape[0]
        chosen = np.full(n_slots, -1, dtype=int)

        # Pinned slots: only one digit left.
        options = mask.sum(axis=1)
        for j in np.flatnonzero(options == 1):
            chosen[j] = int(np.flatnonzero(mask[j])[0])

        # Place known-present digits that are still short of their count.
        placed = np.bincount(chosen[chosen >= 0], minlength=len(HEX_DIGITS))
        for d in np.flatnonzero(req > placed):
            open_rows = [int(j) for j in np.flatnonzero((chosen < 0) & mask[:, d])]
            self.rng.shuffle(open_rows)
            for j in open_rows[: int(req[d] - placed[d])]:
                chosen[j] = d

        # Fill the rest at random from what each slot still allows.
        for j in np.flatnonzero(chosen < 0):
            allowed = [int(d) for d in np.flatnonzero(mask[j])]
            if not allowed:  # contradictory history; any digit will do
                allowed = list(range(len(HEX_DIGITS)))
            chosen[j] = self.rng.choice(allowed)

        return [int(d) for d in chosen]

    def next_guess(self, state: dict) -> str:
        history = state["history"]
        digits = self._choose_digits(slot_mask(history), required_counts(history))
        hexes = "".join(HEX_DIGITS[d] for d in digits)

        parts = []
        pos = 0
        for length in SEGMENTS:
            parts.append(hexes[pos:pos + length])
            pos += length
        return HYPHEN.join(parts)
