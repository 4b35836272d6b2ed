import random

import pytest
from packages.engine.assembly import (
    BACKSPACE, ENTER, append_char, backspace, normalize_key,
)
from packages.engine.identifier import (
    HEX_DIGITS, HYPHEN_POSITIONS, IDENTIFIER_LENGTH, generate, is_partial,
    is_well_formed,
)


def test_shape_constants():
    assert IDENTIFIER_LENGTH == 36
    assert HYPHEN_POSITIONS == (8, 13, 18, 23)


def test_generate_shape_invariant():
    for _ in range(200):
        t = generate()
        assert len(t) == 36
        assert [i for i, c in enumerate(t) if c == "-"] == [8, 13, 18, 23]
        assert all(c in HEX_DIGITS for c in t.replace("-", ""))
        assert is_well_formed(t)


def test_generate_seeded_is_reproducible():
    a = [generate(random.Random(42)) for _ in range(3)]
    assert a[0] == a[1] == a[2]
    assert is_well_formed(a[0])
    assert generate(random.Random(1)) != generate(random.Random(2))


@pytest.mark.parametrize("s,expected", [
    ("", True),
    ("0123abcd", True),
    ("0123abcd-", False),      # never ends on a bare hyphen
    ("0123abcd-e", True),
    ("0123abcde", False),      # digit where the hyphen belongs
    ("0123ABCD", False),
    ("0123abcd-ef01-2345-6789-abcdef012345", True),
    ("0123abcd-ef01-2345-6789-abcdef0123456", False),
])
def test_is_partial(s, expected):
    assert is_partial(s) is expected


def test_32_appends_build_identifier():
    rng = random.Random(9)
    cur = ""
    for _ in range(32):
        cur = append_char(cur, rng.choice(HEX_DIGITS))
    assert len(cur) == 36
    assert is_well_formed(cur)


def test_append_inserts_hyphen_and_lowercases():
    assert append_char("0123abcd", "E") == "0123abcd-e"
    assert append_char("0123abc", "d") == "0123abcd"


def test_append_when_full_is_noop():
    full = "0123abcd-ef01-2345-6789-abcdef012345"
    assert append_char(full, "a") == full


def test_backspace_removes_hyphen_with_digit():
    assert backspace("0123abcd-e") == "0123abcd"
    assert backspace("0123abcd-ef") == "0123abcd-e"
    assert backspace("0") == ""
    assert backspace("") == ""


def test_backspace_inverts_append_at_every_length():
    rng = random.Random(4)
    g = ""
    while len(g) < 36:
        for c in "0f":
            assert backspace(append_char(g, c)) == g
        g = append_char(g, rng.choice(HEX_DIGITS))
        assert is_partial(g)


@pytest.mark.parametrize("key,expected", [
    ("a", "a"),
    ("F", "f"),
    ("7", "7"),
    ("Enter", ENTER),
    ("Backspace", BACKSPACE),
    ("g", None),
    ("-", None),
    ("Shift", None),
    ("", None),
    ("ab", None),
])
def test_normalize_key(key, expected):
    assert normalize_key(key) == expected
