"""
Lightweight guess validation.

This module answers the question: "Is this guess acceptable right now?"
A guess may be submitted iff:
  - it is a string
  - it has exactly 36 characters
  - hyphens sit at positions 8, 13, 18, 23 and nowhere else
  - every other character is a hex digit 0-9 / a-f

Unlike word games there is no dictionary: every well-formed identifier is a
legal guess. Case is normalized before the shape check.
"""

from __future__ import annotations

from .identifier import IDENTIFIER_LENGTH, is_well_formed


def validate_guess(guess: object) -> bool:
    """Return True if `guess` is a complete, well-formed identifier."""
    if not isinstance(guess, str):
        return False

    g = guess.strip().lower()
    if len(g) != IDENTIFIER_LENGTH:
        return False

    return is_well_formed(g)
