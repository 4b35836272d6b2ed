"""
Experiment harness core primitives.

- run_case:  play a single session (one hidden target) with a given solver.
- run_batch: play many sessions in sequence with reproducible targets.
- The attempt budget is owned by the session (GameConfig), not the harness.

Solver guesses go through the same path a human uses: each digit is pressed
via press_key and the guess is submitted with "Enter", so input assembly and
the state machine are exercised exactly as in interactive play.
"""

from __future__ import annotations
import logging
import random
import time
from typing import Dict, List
from packages.engine import (
    GameConfig, Session, Status, press_key, to_pattern, type_guess, validate_guess,
)
from packages.engine.assembly import ENTER
from packages.engine.identifier import generate
from packages.engine.session import MAX_ATTEMPTS

logger = logging.getLogger(__name__)


def run_case(
        solver,
        target: str,
        *,
        max_attempts: int = MAX_ATTEMPTS,
        seed: int | None = None,
) -> Dict:
    """
    Execute one game until the solver wins or the attempt budget is exhausted.

    Args:
        solver:        an object implementing BaseSolver with next_guess(state)
        target:        the hidden identifier for this case
        max_attempts:  attempt budget for the session
        seed:          RNG seed to make solver choices reproducible

    Returns:
        dict with keys:
            success (bool), guesses (int), time_ms (float),
            history (list[(guess, pattern)]), target (str)
    """
    solver.reset(seed=seed)
    session = Session(target=target.lower(), config=GameConfig(max_attempts=max_attempts))

    t0 = time.time()
    while not session.is_over:
        state = {
            "turn": len(session.history) + 1,
            "history": list(session.history),
            "remaining": session.remaining_attempts,
            "rng": solver.rng,
        }
        guess = solver.next_guess(state)
        if not validate_guess(guess):
            raise ValueError(f"solver {solver.id!r} returned a malformed guess: {guess!r}")

        session = press_key(type_guess(session, guess), ENTER)

    dt = (time.time() - t0) * 1000.0
    logger.debug("case %s finished: %s after %d guess(es)", target, session.status.value,
                 len(session.history))
    return {
        "success": session.status is Status.WON,
        "guesses": len(session.history),
        "time_ms": dt,
        "history": [(g, to_pattern(r)) for g, r in session.history],
        "target": target,
    }


def run_batch(
        solver,
        n_games: int,
        *,
        max_attempts: int = MAX_ATTEMPTS,
        seed: int | None = None,
) -> List[Dict]:
    """
    Run many cases back-to-back. Targets come from an RNG seeded with `seed`,
    so the same seed replays the same targets.

    Each case's seed is derived from the base seed to make runs reproducible
    but not identical across cases (seed + index).
    """
    rng = random.Random(seed)

    out: List[Dict] = []
    for idx in range(1, n_games + 1):
        target = generate(rng)
        case_seed = None if seed is None else (seed + idx)
        r = run_case(solver, target, max_attempts=max_attempts, seed=case_seed)
        out.append(r)
    return out
