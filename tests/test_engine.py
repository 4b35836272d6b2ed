import random

import pytest
from packages.engine import Mark, score, to_pattern, validate_guess
from packages.engine.identifier import HYPHEN_POSITIONS, generate


def uid(digits: str) -> str:
    """32 hex digits -> hyphenated identifier."""
    return "-".join([digits[:8], digits[8:12], digits[12:16], digits[16:20], digits[20:]])


ALL_ABSENT = "".join("G" if i in HYPHEN_POSITIONS else "-" for i in range(36))


# --- golden tests (duplicates + placements) ---
@pytest.mark.parametrize("guess,target,expected", [
    # one 'a' in target, two guessed: the positional match wins, the other is absent
    (uid("aa" + "0" * 30), uid("a" + "0" * 31), "G-" + "G" * 34),
    # ...even when the matching 'a' comes second
    (uid("aa" + "0" * 30), uid("0a" + "0" * 30), "-G" + "G" * 34),
    # swapped pair: both misplaced
    (uid("ba" + "0" * 30), uid("ab" + "0" * 30), "YY" + "G" * 34),
    # three 'a' guessed, two in target at other spots: only two yellows for 'a'
    (uid("00aaa" + "0" * 27), uid("aa" + "0" * 30), "YYYY-" + "G" * 31),
    # nothing shared: only the hyphens are green
    (uid("0" * 32), uid("1" * 32), ALL_ABSENT),
])
def test_score_golden(guess, target, expected):
    assert to_pattern(score(guess, target)) == expected


def test_score_exact_match_all_correct():
    t = generate(random.Random(3))
    assert all(m is Mark.CORRECT for m in score(t, t))


def test_score_case_insensitive():
    t = uid("abcdef0123456789" * 2)
    assert score(t.upper(), t) == score(t, t)


def test_score_rejects_wrong_length():
    with pytest.raises(ValueError):
        score("abc", uid("0" * 32))


def test_score_conservation_and_no_false_positives():
    rng = random.Random(11)
    # Small alphabets force plenty of duplicates on both sides.
    for _ in range(300):
        target = uid("".join(rng.choice("01ab") for _ in range(32)))
        guess = uid("".join(rng.choice("01abcf") for _ in range(32)))
        result = score(guess, target)
        assert len(result) == 36
        for v in set(guess) - {"-"}:
            claimed = sum(1 for g, m in zip(guess, result)
                          if g == v and m is not Mark.ABSENT)
            assert claimed <= target.count(v)
            if v not in target:
                assert claimed == 0


def test_hyphen_positions_always_correct():
    rng = random.Random(5)
    for _ in range(50):
        result = score(generate(rng), generate(rng))
        assert all(result[p] is Mark.CORRECT for p in HYPHEN_POSITIONS)


def test_validate_guess():
    good = "3f2504e0-4f89-11d3-9a0c-0305e82c3301"
    assert validate_guess(good) is True
    assert validate_guess(good.upper()) is True
    assert validate_guess(good[:-1]) is False
    assert validate_guess(good.replace("-", "")) is False
    assert validate_guess("3f2504e04-f89-11d3-9a0c-0305e82c3301") is False
    assert validate_guess("3f2504e0-4f89-11d3-9a0c-0305e82c330g") is False
    assert validate_guess(None) is False
