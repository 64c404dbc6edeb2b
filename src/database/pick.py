"""
Hear Me Out - Pick Manager

Append and read operations for the `picks` table. Picks are never
updated or deleted once made.
"""

from postgrest.exceptions import APIError
from supabase import Client

from src.database.errors import PickConflictError, first_row, is_unique_violation
from src.database.models import Pick


class PickManager:
    """Manages draft picks in Supabase."""

    def __init__(self, client: Client) -> None:
        self.client = client
        self.table = client.table("picks")

    def create(self, game_id: str, player_id: str, entry_id: str, pick_number: int) -> Pick:
        """
        Record a pick.

        Raises:
            PickConflictError: If the pick number or entry is already taken in this game
        """
        try:
            data = (
                self.table
                .insert({
                    "draft_game_id": game_id,
                    "player_id": player_id,
                    "entry_id": entry_id,
                    "pick_number": pick_number,
                })
                .execute()
            )
        except APIError as e:
            if is_unique_violation(e):
                raise PickConflictError(
                    f"Pick {pick_number} of game {game_id} conflicts with an existing pick"
                ) from e
            raise
        return Pick.model_validate(first_row(data.data, f"Recording pick {pick_number}"))

    def list_by_game(self, game_id: str) -> list[Pick]:
        """Get all picks in a game, in pick order."""
        data = (
            self.table
            .select("*")
            .eq("draft_game_id", game_id)
            .order("pick_number")
            .execute()
        )
        return [Pick.model_validate(row) for row in data.data]
