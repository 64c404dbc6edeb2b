"""
Hear Me Out - Session Errors
"""


class DraftError(Exception):
    """Base class for errors raised by the session layer."""


class GameNotFoundError(DraftError):
    """The requested draft game does not exist."""


class DraftCreationError(DraftError):
    """Players could not be seated for a new draft."""


class InvalidStatusError(DraftError):
    """The game is not in the phase the operation requires."""


class BallotError(DraftError):
    """A ballot was rejected."""
