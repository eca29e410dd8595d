"""
One game of Mastermind from the codemaker's side.

The Session owns the hidden secret and is the only place feedback comes from.
The secret stays hidden until the game concludes (a win, or an explicit
conclude() by the caller once it gives up).
"""

from __future__ import annotations

import logging
import random

from .codespace import enumerate_codes
from .config import SolverConfig
from .errors import SessionError
from .scoring import Feedback, score
from .validation import require_code

log = logging.getLogger(__name__)


class Session:
    def __init__(self, config: SolverConfig | None = None, *,
                 rng: random.Random | None = None, secret: str | None = None):
        self.config = config or SolverConfig()
        self.alphabet = self.config.alphabet
        self.N = self.config.code_length
        if secret is None:
            rng = rng or random.Random()
            secret = rng.choice(enumerate_codes(self.alphabet, self.N))
        self._secret = require_code(secret, self.alphabet, self.N)
        self.turns = 0
        self.won = False
        self.concluded = False

    def score(self, guess: str) -> Feedback:
        """Score `guess` against the secret; a full exact match wins the game."""
        if self.concluded:
            raise SessionError("game already concluded")
        require_code(guess, self.alphabet, self.N)
        fb = score(guess, self._secret)
        self.turns += 1
        if fb.exact == self.N:
            self.won = True
            self.concluded = True
            log.info("secret found in %d turn(s)", self.turns)
        return fb

    def conclude(self) -> str:
        """End the game (e.g. the caller ran out of turns) and reveal the secret."""
        self.concluded = True
        return self._secret

    @property
    def secret(self) -> str:
        if not self.concluded:
            raise SessionError("secret is hidden until the game concludes")
        return self._secret
