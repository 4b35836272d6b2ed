"""
What the feedback so far says about the hidden target.

Given:
  - a history of (guess, result) pairs produced by the engine

Provide:
  - is_consistent:   would this candidate have produced every recorded result?
  - slot_mask:       (32, 16) bool array, which digits are still possible at
                     each hex slot
  - required_counts: (16,) int array, the minimum number of times each digit
                     must occur in the target

Word-list Wordle can enumerate candidates; with 16**32 identifiers we cannot,
so solvers work from the per-slot mask instead.
"""

from __future__ import annotations

from collections import Counter
from typing import Iterable, Set, Tuple

import numpy as np

from .identifier import HEX_DIGITS, HEX_SLOTS
from .scoring import GuessResult, Mark, score

History = Iterable[Tuple[str, GuessResult]]

_DIGIT_INDEX = {d: i for i, d in enumerate(HEX_DIGITS)}


def is_consistent(candidate: str, history: History) -> bool:
    """True iff scoring each past guess against `candidate` reproduces its result."""
    for guess, result in history:
        if score(guess, candidate) != tuple(result):
            return False
    return True


def _tally(guess: str, result: GuessResult) -> Tuple[Counter, Set[str]]:
    """Per guess: digits confirmed (CORRECT or PRESENT) and digits with an ABSENT mark."""
    confirmed: Counter = Counter()
    capped: Set[str] = set()
    for pos in HEX_SLOTS:
        ch, mark = guess[pos].lower(), result[pos]
        if mark is Mark.ABSENT:
            capped.add(ch)
        else:
            confirmed[ch] += 1
    return confirmed, capped


def required_counts(history: History) -> np.ndarray:
    """Lower bound on each digit's multiplicity in the target, indexed like HEX_DIGITS."""
    req = np.zeros(len(HEX_DIGITS), dtype=int)
    for guess, result in history:
        confirmed, _ = _tally(guess, result)
        for ch, n in confirmed.items():
            idx = _DIGIT_INDEX[ch]
            req[idx] = max(req[idx], n)
    return req


def slot_mask(history: History) -> np.ndarray:
    """
    Boolean array of shape (32, 16): mask[j, d] is True while digit
    HEX_DIGITS[d] may still sit at hex slot j (the j-th entry of HEX_SLOTS).
    """
    history = list(history)
    mask = np.ones((len(HEX_SLOTS), len(HEX_DIGITS)), dtype=bool)
    fixed = np.full(len(HEX_SLOTS), -1, dtype=int)
    exact = np.full(len(HEX_DIGITS), -1, dtype=int)  # known multiplicity, -1 = unknown

    for guess, result in history:
        for j, pos in enumerate(HEX_SLOTS):
            d = _DIGIT_INDEX[guess[pos].lower()]
            if result[pos] is Mark.CORRECT:
                fixed[j] = d
            else:
                mask[j, d] = False  # misplaced or absent: not here

        # An ABSENT mark caps the digit at the number of confirmed copies.
        confirmed, capped = _tally(guess, result)
        for ch in capped:
            exact[_DIGIT_INDEX[ch]] = confirmed.get(ch, 0)

    for j in np.flatnonzero(fixed >= 0):
        mask[j, :] = False
        mask[j, fixed[j]] = True

    # Once every copy of a capped digit is pinned, it cannot appear elsewhere.
    open_rows = fixed < 0
    for d in np.flatnonzero(exact >= 0):
        if np.count_nonzero(fixed == d) >= exact[d]:
            mask[open_rows, d] = False

    return mask
