"""
Hear Me Out Sessions.

Orchestration of the drafting and voting phases over an injected repository.
"""

from src.session.draft import DraftSession
from src.session.errors import (
    BallotError,
    DraftCreationError,
    DraftError,
    GameNotFoundError,
    InvalidStatusError,
)
from src.session.voting import VotingSession

__all__ = [
    "BallotError",
    "DraftCreationError",
    "DraftError",
    "DraftSession",
    "GameNotFoundError",
    "InvalidStatusError",
    "VotingSession",
]
