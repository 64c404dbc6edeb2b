"""
Hear Me Out Database Layer.

Supabase integration for drafts, entries, games, players, picks and votes.
"""

from src.database.client import get_supabase_client
from src.database.draft import DraftManager
from src.database.draft_game import DraftGameManager
from src.database.entry import EntryManager
from src.database.errors import PersistenceError, PickConflictError, VoteConflictError
from src.database.models import Draft, DraftGame, Entry, Pick, Player, Vote
from src.database.pick import PickManager
from src.database.player import PlayerManager
from src.database.repository import DraftRepository, SupabaseDraftRepository, get_draft_repository
from src.database.vote import VoteManager

__all__ = [
    "get_draft_repository",
    "get_supabase_client",
    "Draft",
    "DraftGame",
    "DraftGameManager",
    "DraftManager",
    "DraftRepository",
    "Entry",
    "EntryManager",
    "PersistenceError",
    "Pick",
    "PickConflictError",
    "PickManager",
    "Player",
    "PlayerManager",
    "SupabaseDraftRepository",
    "Vote",
    "VoteConflictError",
    "VoteManager",
]
