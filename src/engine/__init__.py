"""
Hear Me Out Game Engine.

Pure Python draft and voting logic with zero UI/database dependencies.
Handles snake draft turn order, pick legality, and ranked-vote scoring.
"""

from src.engine.base import (
    DraftState,
    Entry,
    GameStatus,
    Pick,
    Player,
    Vote,
    VoteResult,
)
from src.engine.scoring import ScoringEngine
from src.engine.snake_draft import DraftEngine

__all__ = [
    # Data Classes
    "DraftState",
    "Entry",
    "Pick",
    "Player",
    "Vote",
    "VoteResult",
    # Enums
    "GameStatus",
    # Engines
    "DraftEngine",
    "ScoringEngine",
]
