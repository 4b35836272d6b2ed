"""
Game state machine.

A Session is one immutable value; every operation returns a new one:

    new_game() -> Session
    press_key(session, key) -> Session      # digits, "Backspace", "Enter"
    submit(session) -> Session              # raises IncompleteGuess / GameOver
    reset(session) -> Session

Status moves playing -> won or playing -> lost and then stays put until
reset. Once terminal, press_key ignores everything and submit raises.
"""

from __future__ import annotations

import logging
import random
from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Dict, Tuple

from .assembly import BACKSPACE, ENTER, append_char, backspace, normalize_key
from .errors import GameOver, IncompleteGuess
from .identifier import HYPHEN, IDENTIFIER_LENGTH, generate, is_partial, is_well_formed
from .keyboard import key_statuses
from .scoring import GuessResult, Mark, score

logger = logging.getLogger(__name__)

# Attempt budget for a game; fixed for the lifetime of a session.
MAX_ATTEMPTS = 5

INCOMPLETE_MESSAGE = "UUID must be complete"
WON_MESSAGE = "You won!"
LOST_MESSAGE = "Game over! The UUID was: {target}"


class Status(str, Enum):
    PLAYING = "playing"
    WON = "won"
    LOST = "lost"


@dataclass(frozen=True)
class GameConfig:
    max_attempts: int = MAX_ATTEMPTS

    def __post_init__(self):
        if self.max_attempts < 1:
            raise ValueError(f"max_attempts must be >= 1; got {self.max_attempts}")


@dataclass(frozen=True)
class Session:
    target: str
    config: GameConfig = field(default_factory=GameConfig)
    history: Tuple[Tuple[str, GuessResult], ...] = ()
    current_guess: str = ""
    status: Status = Status.PLAYING
    message: str = ""

    def __post_init__(self):
        if not is_well_formed(self.target.lower()):
            raise ValueError(f"target is not a well-formed identifier: {self.target!r}")
        if not is_partial(self.current_guess):
            raise ValueError(f"current guess is not a valid prefix: {self.current_guess!r}")

    @property
    def guesses(self) -> Tuple[str, ...]:
        return tuple(g for g, _ in self.history)

    @property
    def remaining_attempts(self) -> int:
        return self.config.max_attempts - len(self.history)

    @property
    def is_over(self) -> bool:
        return self.status is not Status.PLAYING

    @property
    def key_statuses(self) -> Dict[str, Mark]:
        return key_statuses(self.history)


def new_game(config: GameConfig | None = None, rng: random.Random | None = None) -> Session:
    """Start a fresh session with a newly generated target."""
    session = Session(target=generate(rng), config=config or GameConfig())
    logger.debug("new game started (max_attempts=%d)", session.config.max_attempts)
    return session


def reset(session: Session, rng: random.Random | None = None) -> Session:
    """Throw the session away and start over with the same config. Valid in any state."""
    return new_game(session.config, rng)


def submit(session: Session) -> Session:
    """
    Score the current guess and advance the state machine.

    Raises:
      GameOver        if the session is already won or lost
      IncompleteGuess if the guess is shorter than 36 characters
    """
    if session.is_over:
        raise GameOver(f"game already {session.status.value}")

    guess = session.current_guess
    if len(guess) != IDENTIFIER_LENGTH:
        raise IncompleteGuess(len(guess))

    result = score(guess, session.target)
    history = session.history + ((guess, result),)

    if guess.lower() == session.target.lower():
        status, message = Status.WON, WON_MESSAGE
        logger.info("game won in %d guess(es)", len(history))
    elif len(history) >= session.config.max_attempts:
        status, message = Status.LOST, LOST_MESSAGE.format(target=session.target)
        logger.info("game lost; target was %s", session.target)
    else:
        status, message = Status.PLAYING, ""

    return replace(
        session,
        history=history,
        current_guess="",
        status=status,
        message=message,
    )


def press_key(session: Session, key: str) -> Session:
    """
    Route one key press: hex digits extend the guess, Backspace removes one
    digit, Enter submits. Anything else, and every key once the game is over,
    leaves the session unchanged.
    """
    if session.is_over:
        return session

    k = normalize_key(key)
    if k is None:
        logger.debug("ignoring key %r", key)
        return session

    # Advisory messages last until the next accepted key.
    session = replace(session, message="")

    if k == ENTER:
        try:
            return submit(session)
        except IncompleteGuess as e:
            logger.debug("submit rejected: %s", e)
            return replace(session, message=INCOMPLETE_MESSAGE)
    if k == BACKSPACE:
        return replace(session, current_guess=backspace(session.current_guess))
    return replace(session, current_guess=append_char(session.current_guess, k))


def type_guess(session: Session, text: str) -> Session:
    """
    Press every character of `text` in order. Hyphens are skipped because
    input assembly places them itself; this lets callers pass a full
    identifier and get exactly its 32 digits typed.
    """
    for ch in text:
        if ch == HYPHEN:
            continue
        session = press_key(session, ch)
    return session
