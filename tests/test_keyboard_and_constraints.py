import random

import numpy as np
from packages.engine import Mark, is_consistent, required_counts, score, slot_mask
from packages.engine.identifier import HEX_DIGITS, HEX_SLOTS
from packages.engine.keyboard import key_statuses


def uid(digits: str) -> str:
    return "-".join([digits[:8], digits[8:12], digits[12:16], digits[16:20], digits[20:]])


def _history(target, guesses):
    return [(g, score(g, target)) for g in guesses]


# --- keyboard fold ---

def test_key_statuses_best_mark_wins():
    target = uid("a" + "0" * 31)
    hist = _history(target, [uid("ba" + "0" * 30), target])
    ks = key_statuses(hist)
    assert ks == {"a": Mark.CORRECT, "b": Mark.ABSENT, "0": Mark.CORRECT}
    assert "f" not in ks and "-" not in ks


def test_key_statuses_order_independent():
    target = uid("a" + "0" * 31)
    hist = _history(target, [uid("ba" + "0" * 30), uid("c" * 32)])
    assert key_statuses(hist) == key_statuses(list(reversed(hist)))
    assert key_statuses(hist)["a"] is Mark.PRESENT


def test_key_statuses_empty_history():
    assert key_statuses([]) == {}


# --- constraints ---

def test_required_counts_and_mask_from_swapped_pair():
    target = uid("ab" + "1" * 30)
    hist = _history(target, [uid("ba" + "0" * 30)])
    req = required_counts(hist)
    a, b, zero = HEX_DIGITS.index("a"), HEX_DIGITS.index("b"), HEX_DIGITS.index("0")
    assert req[a] == 1 and req[b] == 1 and req[zero] == 0
    assert req.sum() == 2

    mask = slot_mask(hist)
    assert mask.shape == (32, 16)
    assert not mask[:, zero].any()      # absent digit ruled out everywhere
    assert not mask[0, b] and not mask[1, a]
    assert mask[0, a] and mask[1, b]


def test_correct_mark_pins_slot():
    target = uid("f" + "1" * 31)
    hist = _history(target, [uid("f" + "0" * 31)])
    mask = slot_mask(hist)
    assert mask[0].sum() == 1
    assert mask[0, HEX_DIGITS.index("f")]


def test_feedback_never_rules_out_the_target():
    rng = random.Random(21)
    for _ in range(60):
        target = uid("".join(rng.choice("01ab") for _ in range(32)))
        guesses = [uid("".join(rng.choice("01abc") for _ in range(32))) for _ in range(4)]
        hist = _history(target, guesses)

        assert is_consistent(target, hist)

        mask = slot_mask(hist)
        for j, pos in enumerate(HEX_SLOTS):
            assert mask[j, HEX_DIGITS.index(target[pos])]

        actual = np.array([target.count(d) for d in HEX_DIGITS])
        assert (required_counts(hist) <= actual).all()


def test_is_consistent_rejects_contradiction():
    target = uid("f" + "1" * 31)
    hist = _history(target, [uid("f" + "0" * 31)])
    assert not is_consistent(uid("e" + "1" * 31), hist)
