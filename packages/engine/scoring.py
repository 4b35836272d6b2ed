"""
Wordle-style scoring (feedback) for a single (guess, target) identifier pair.

Each of the 36 positions gets a Mark:
  - CORRECT : same hex digit at the same position (hyphen slots always)
  - PRESENT : digit occurs in the target at another, still unclaimed position
  - ABSENT  : digit not in the target, or already claimed by other marks

Algorithm (two-pass, canonical for Wordle):
  1) First pass marks all exact matches and pools the target digits at the
     positions that did not match.
  2) Second pass, left to right, marks PRESENT only while the pool still holds
     that digit, consuming one occurrence per mark.

So for every digit v: #CORRECT(v) + #PRESENT(v) <= count of v in the target.
Hyphen positions are fixed by the shape and never enter the pool.
"""

from __future__ import annotations

from collections import Counter
from enum import Enum
from typing import Sequence, Tuple

from .identifier import HYPHEN_POSITIONS, IDENTIFIER_LENGTH


class Mark(str, Enum):
    CORRECT = "correct"
    PRESENT = "present"
    ABSENT = "absent"


GuessResult = Tuple[Mark, ...]

# Compact single-character rendering used in reports and the terminal UI.
_PATTERN_CHARS = {Mark.CORRECT: "G", Mark.PRESENT: "Y", Mark.ABSENT: "-"}


def score(guess: str, target: str) -> GuessResult:
    """
    Compute the feedback for `guess` against `target`.

    Preconditions:
      - both are 36 characters long (raises ValueError otherwise)

    Comparison is case-insensitive. The function is pure: same inputs give the
    same result, nothing else is read or written.
    """
    guess = guess.lower()
    target = target.lower()
    if len(guess) != IDENTIFIER_LENGTH or len(target) != IDENTIFIER_LENGTH:
        raise ValueError(
            f"guess and target must both be {IDENTIFIER_LENGTH} characters; "
            f"got {len(guess)} and {len(target)}"
        )

    marks = [Mark.ABSENT] * IDENTIFIER_LENGTH

    # Pass 1: exact matches; everything the target still offers goes to the pool.
    remaining: Counter[str] = Counter()
    for i, (g, t) in enumerate(zip(guess, target)):
        if i in HYPHEN_POSITIONS or g == t:
            marks[i] = Mark.CORRECT
        else:
            remaining[t] += 1

    # Pass 2: claim misplaced occurrences in position order.
    for i, g in enumerate(guess):
        if marks[i] is Mark.CORRECT:
            continue
        if remaining[g] > 0:
            marks[i] = Mark.PRESENT
            remaining[g] -= 1

    return tuple(marks)


def to_pattern(result: Sequence[Mark]) -> str:
    """
    Render a result as a G/Y/- string, e.g. "GG-Y....".
    Hyphen slots render as 'G' since they are always correct.
    """
    return "".join(_PATTERN_CHARS[m] for m in result)
