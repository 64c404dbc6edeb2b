"""
Hear Me Out - Draft Repository

The persistence capability set the session layer needs, expressed as a
Protocol so sessions can be constructed with any implementation, plus the
Supabase-backed implementation built on the table managers.
"""

from __future__ import annotations

import logging
from typing import Protocol

from supabase import Client

from src.database.client import get_supabase_client
from src.database.draft_game import DraftGameManager
from src.database.entry import EntryManager
from src.database.errors import PersistenceError
from src.database.pick import PickManager
from src.database.player import PlayerManager
from src.database.vote import VoteManager
from src.engine.base import Entry, GameStatus, Pick, Player, Vote

logger = logging.getLogger(__name__)


class DraftRepository(Protocol):
    """Reads and appends the records of a single draft game."""

    def get_status(self, game_id: str) -> GameStatus | None: ...

    def get_players(self, game_id: str) -> list[Player]: ...

    def get_entries(self, game_id: str) -> list[Entry]: ...

    def get_picks(self, game_id: str) -> list[Pick]: ...

    def get_votes(self, game_id: str) -> list[Vote]: ...

    def add_player(self, game_id: str, name: str, turn_order: int) -> Player: ...

    def delete_player(self, player_id: str) -> None: ...

    def append_pick(self, game_id: str, player_id: str, entry_id: str, pick_number: int) -> Pick: ...

    def append_vote(self, game_id: str, voter_player_id: str, rank: int, voted_player_id: str) -> Vote: ...

    def update_status(self, game_id: str, status: GameStatus) -> None: ...


class SupabaseDraftRepository:
    """DraftRepository backed by the Supabase table managers."""

    def __init__(self, client: Client) -> None:
        self._client = client
        self._games = DraftGameManager(client)
        self._entries = EntryManager(client)
        self._players = PlayerManager(client)
        self._picks = PickManager(client)
        self._votes = VoteManager(client)

    def get_status(self, game_id: str) -> GameStatus | None:
        game = self._games.get(game_id)
        if game is None:
            return None
        return game.game_status

    def get_players(self, game_id: str) -> list[Player]:
        return [row.to_engine() for row in self._players.list_by_game(game_id)]

    def get_entries(self, game_id: str) -> list[Entry]:
        """Entries of the draft the game is played on."""
        game = self._games.get(game_id)
        if game is None:
            raise PersistenceError(f"Game {game_id} not found")
        return [row.to_engine() for row in self._entries.list_by_draft(str(game.draft_id))]

    def get_picks(self, game_id: str) -> list[Pick]:
        return [row.to_engine() for row in self._picks.list_by_game(game_id)]

    def get_votes(self, game_id: str) -> list[Vote]:
        return [row.to_engine() for row in self._votes.list_by_game(game_id)]

    def add_player(self, game_id: str, name: str, turn_order: int) -> Player:
        return self._players.add(game_id, name, turn_order).to_engine()

    def delete_player(self, player_id: str) -> None:
        self._players.delete(player_id)
        logger.debug("Removed player %s", player_id)

    def append_pick(self, game_id: str, player_id: str, entry_id: str, pick_number: int) -> Pick:
        pick = self._picks.create(game_id, player_id, entry_id, pick_number)
        logger.debug("Recorded pick %d in game %s", pick_number, game_id)
        return pick.to_engine()

    def append_vote(self, game_id: str, voter_player_id: str, rank: int, voted_player_id: str) -> Vote:
        return self._votes.submit(game_id, voter_player_id, rank, voted_player_id).to_engine()

    def update_status(self, game_id: str, status: GameStatus) -> None:
        self._games.update_status(game_id, status)
        logger.info("Game %s moved to %s", game_id, status.value)


def get_draft_repository() -> SupabaseDraftRepository:
    """Repository over the process-wide Supabase client."""
    return SupabaseDraftRepository(get_supabase_client())
