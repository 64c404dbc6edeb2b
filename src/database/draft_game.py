"""
Hear Me Out - Draft Game Manager

CRUD operations for the `draft_games` table.
"""

from datetime import datetime, timezone

from supabase import Client

from src.database.errors import PersistenceError, first_row
from src.database.models import DraftGame
from src.engine.base import GameStatus

_OPEN_FOR_VOTING = (GameStatus.HEAR_ME_OUT.value, GameStatus.VOTING.value)


class DraftGameManager:
    """Manages draft game lifecycle in Supabase."""

    def __init__(self, client: Client) -> None:
        self.client = client
        self.table = client.table("draft_games")

    def create(self, draft_id: str) -> DraftGame:
        """Start a new game on a draft, in the drafting phase."""
        data = (
            self.table
            .insert({
                "draft_id": draft_id,
                "status": GameStatus.DRAFTING.value,
            })
            .execute()
        )
        return DraftGame.model_validate(first_row(data.data, "Creating draft game"))

    def get(self, game_id: str) -> DraftGame | None:
        """Look up a game by its UUID."""
        data = (
            self.table
            .select("*")
            .eq("id", game_id)
            .execute()
        )
        if data.data:
            return DraftGame.model_validate(data.data[0])
        return None

    def update_status(self, game_id: str, status: GameStatus) -> DraftGame:
        """Move a game to a new phase."""
        data = (
            self.table
            .update({
                "status": status.value,
                "updated_at": datetime.now(timezone.utc).isoformat(),
            })
            .eq("id", game_id)
            .execute()
        )
        return DraftGame.model_validate(first_row(data.data, f"Updating status of game {game_id}"))

    def list_for_draft(self, draft_id: str) -> list[DraftGame]:
        """Games played on a draft, newest first."""
        data = (
            self.table
            .select("*")
            .eq("draft_id", draft_id)
            .order("created_at", desc=True)
            .execute()
        )
        return [DraftGame.model_validate(row) for row in data.data]

    def list_all(self) -> list[DraftGame]:
        """All games, most recently updated first."""
        data = (
            self.table
            .select("*")
            .order("updated_at", desc=True)
            .execute()
        )
        return [DraftGame.model_validate(row) for row in data.data]

    def list_in_voting(self) -> list[DraftGame]:
        """Games past the draft that have not finished voting."""
        data = (
            self.table
            .select("*")
            .in_("status", list(_OPEN_FOR_VOTING))
            .order("updated_at", desc=True)
            .execute()
        )
        return [DraftGame.model_validate(row) for row in data.data]

    def delete(self, game_id: str) -> None:
        """
        Delete a game (cascades to players, picks and votes).

        Raises:
            PersistenceError: If no row was removed, e.g. blocked by a row-level policy
        """
        data = self.table.delete().eq("id", game_id).execute()
        if not data.data:
            raise PersistenceError(f"Deleting game {game_id} removed no rows")
