"""
Error taxonomy for the Mastermind engine.

Everything raised on purpose by this package derives from MastermindError so
callers can catch the whole family in one place. Configuration and input
problems also subclass ValueError, matching how the rest of the code signals
bad arguments.
"""


class MastermindError(Exception):
    """Base class for all engine/solver errors."""


class InvalidConfiguration(MastermindError, ValueError):
    """A solver/game option is out of range (raised at construction)."""


class InvalidCode(MastermindError, ValueError):
    """A guess is not a well-formed code for the current alphabet/length."""


class ExhaustedCodeSpace(MastermindError, RuntimeError):
    """More unused codes were requested than the Code Space has left."""


class EmptyEligibleSet(MastermindError):
    """A search round finished without finding any code consistent with history."""


class SessionError(MastermindError):
    """Session used out of order (secret read too early, scoring after a win)."""
