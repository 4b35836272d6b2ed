# apps/cli/play.py
"""
Play UUIDle in the terminal.

Each line you enter is a stream of key presses:
  - hex digits 0-9 / a-f are typed (hyphens are placed for you)
  - '<' is Backspace
  - anything else is ignored
  - the end of the line presses Enter

So pasting a full UUID submits it; a partial line keeps what you typed and
tells you the UUID must be complete. Commands: ':new' starts over, ':quit'
exits.

Feedback per character: G = right spot, Y = wrong spot, - = not in the UUID.
"""

from __future__ import annotations

import argparse
import logging
import random
from typing import Tuple

from packages.engine import GameConfig, Session, new_game, press_key, reset, to_pattern
from packages.engine.assembly import BACKSPACE, ENTER
from packages.engine.identifier import HEX_DIGITS, IDENTIFIER_LENGTH
from packages.engine.session import MAX_ATTEMPTS


def render(session: Session) -> str:
    """Text view of the board: scored rows, the row being typed, keyboard, status."""
    lines = []
    for i, (guess, result) in enumerate(session.history, 1):
        lines.append(f"{i:>2}  {guess}  {to_pattern(result)}")
    if not session.is_over:
        typed = session.current_guess.ljust(IDENTIFIER_LENGTH, ".")
        lines.append(f" >  {typed}")

    statuses = session.key_statuses
    keys = " ".join(d + (to_pattern([statuses[d]]) if d in statuses else " ") for d in HEX_DIGITS)
    lines.append(f"    keys: {keys}")

    if session.is_over:
        lines.append(f"    {session.message}  (':new' to play again)")
    else:
        used = len(session.history)
        lines.append(f"    {used} of {session.config.max_attempts} guesses")
        if session.message:
            lines.append(f"    {session.message}")
    return "\n".join(lines)


def handle_line(session: Session, line: str, rng: random.Random | None = None) -> Tuple[Session, bool]:
    """
    Apply one line of input. Returns the new session and whether to quit.
    """
    cmd = line.strip()
    if cmd == ":quit":
        return session, True
    if cmd == ":new":
        return reset(session, rng), False

    for ch in cmd:
        session = press_key(session, BACKSPACE if ch == "<" else ch)
    return press_key(session, ENTER), False


def main(argv: list[str] | None = None):
    ap = argparse.ArgumentParser(description="UUIDle — guess the UUID")
    ap.add_argument("--attempts", type=int, default=MAX_ATTEMPTS, help="guesses per game")
    ap.add_argument("--seed", type=int, help="RNG seed for reproducible targets")
    ap.add_argument("--log-level", default="WARNING",
                    choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    args = ap.parse_args(argv)

    logging.basicConfig(level=args.log_level,
                        format="%(asctime)s %(levelname)s %(name)s: %(message)s")

    rng = random.Random(args.seed) if args.seed is not None else None
    session = new_game(GameConfig(max_attempts=args.attempts), rng)

    print(f"Guess the UUID in {args.attempts} tries. G = right spot, Y = wrong spot, - = not in the UUID.")
    print("Type hex digits ('<' deletes one), press Enter to submit. ':new' restarts, ':quit' exits.")
    print(render(session))

    while True:
        try:
            line = input("? ")
        except EOFError:
            break
        session, done = handle_line(session, line, rng)
        if done:
            break
        print(render(session))


if __name__ == "__main__":
    main()
