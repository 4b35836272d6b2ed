"""
Keyboard status: the best mark each hex digit has earned so far.

This is a pure fold over the guess history, recomputed on demand, so it can
never drift from the scored rows it summarizes.
"""

from __future__ import annotations

from typing import Dict, Iterable, Tuple

from .identifier import HEX_DIGITS
from .scoring import GuessResult, Mark

_RANK = {Mark.ABSENT: 0, Mark.PRESENT: 1, Mark.CORRECT: 2}


def key_statuses(history: Iterable[Tuple[str, GuessResult]]) -> Dict[str, Mark]:
    """
    Map each hex digit seen in any guess to its best mark
    (CORRECT > PRESENT > ABSENT). Unseen digits are left out.
    """
    out: Dict[str, Mark] = {}
    for guess, result in history:
        for ch, mark in zip(guess.lower(), result):
            if ch not in HEX_DIGITS:
                continue  # hyphen
            best = out.get(ch)
            if best is None or _RANK[mark] > _RANK[best]:
                out[ch] = mark
    return out
