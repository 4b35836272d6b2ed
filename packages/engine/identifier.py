"""
Identifier shape and the Target Generator.

An identifier is the canonical hyphenated form of a UUID:

    xxxxxxxx-xxxx-xxxx-xxxx-xxxxxxxxxxxx
    segments of 8, 4, 4, 4, 12 lowercase hex digits

Both the hidden target and every guess share this shape. Only the shape
matters to the game; version/variant bits carry no meaning here.
"""

from __future__ import annotations

import random
import re
import uuid
from typing import List, Tuple

SEGMENTS: Tuple[int, ...] = (8, 4, 4, 4, 12)
HEX_DIGITS = "0123456789abcdef"
HYPHEN = "-"


def _hyphen_positions(segments: Tuple[int, ...]) -> Tuple[int, ...]:
    out: List[int] = []
    pos = 0
    for length in segments[:-1]:
        pos += length
        out.append(pos)
        pos += 1  # the hyphen itself
    return tuple(out)


HYPHEN_POSITIONS: Tuple[int, ...] = _hyphen_positions(SEGMENTS)  # (8, 13, 18, 23)
IDENTIFIER_LENGTH = sum(SEGMENTS) + len(SEGMENTS) - 1  # 36

# The 32 positions that hold hex digits, in order.
HEX_SLOTS: Tuple[int, ...] = tuple(
    i for i in range(IDENTIFIER_LENGTH) if i not in HYPHEN_POSITIONS
)

_WELL_FORMED = re.compile(
    "^" + HYPHEN.join(f"[0-9a-f]{{{n}}}" for n in SEGMENTS) + "$"
)


def generate(rng: random.Random | None = None) -> str:
    """
    Return a fresh random identifier.

    Without `rng` this is just uuid4. With a seeded random.Random the 128 bits
    come from that generator instead, so harness runs are reproducible.
    """
    if rng is None:
        return str(uuid.uuid4())
    return str(uuid.UUID(int=rng.getrandbits(128), version=4))


def is_well_formed(s: str) -> bool:
    """True iff `s` is a complete, lowercase, correctly hyphenated identifier."""
    return isinstance(s, str) and _WELL_FORMED.match(s) is not None


def is_partial(s: str) -> bool:
    """
    True iff `s` is a prefix that input assembly can produce: hex digits in
    hex slots, hyphens in hyphen slots, and never ending on a bare hyphen.
    The empty string and complete identifiers both count.
    """
    if not isinstance(s, str) or len(s) > IDENTIFIER_LENGTH:
        return False
    if s.endswith(HYPHEN):
        return False
    for i, ch in enumerate(s):
        if i in HYPHEN_POSITIONS:
            if ch != HYPHEN:
                return False
        elif ch not in HEX_DIGITS:
            return False
    return True
