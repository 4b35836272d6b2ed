"""
Input assembly: turn discrete key presses into a growing guess.

The player only ever types hex digits. Hyphens are inserted automatically
when the next digit would land on a hyphen slot, and removed together with
the digit that follows them on backspace, so one backspace always undoes
exactly one typed digit.
"""

from __future__ import annotations

from typing import Optional

from .identifier import HEX_DIGITS, HYPHEN, HYPHEN_POSITIONS, IDENTIFIER_LENGTH

ENTER = "Enter"
BACKSPACE = "Backspace"


def normalize_key(key: str) -> Optional[str]:
    """
    Map a raw key name to what the engine understands.

    Returns ENTER, BACKSPACE, a lowercase hex digit, or None for anything
    else (which callers ignore).
    """
    if key in (ENTER, BACKSPACE):
        return key
    if isinstance(key, str) and len(key) == 1 and key.lower() in HEX_DIGITS:
        return key.lower()
    return None


def append_char(current: str, key: str) -> str:
    """Append one hex digit, inserting the hyphen first when one is due."""
    if len(current) >= IDENTIFIER_LENGTH:
        return current
    key = key.lower()
    if len(current) in HYPHEN_POSITIONS:
        return current + HYPHEN + key
    return current + key


def backspace(current: str) -> str:
    """Remove the last typed digit, plus the hyphen in front of it if any."""
    if len(current) - 2 in HYPHEN_POSITIONS:
        return current[:-2]
    return current[:-1]
