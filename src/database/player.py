"""
Hear Me Out - Player Manager

CRUD operations for the `players` table.
"""

from supabase import Client

from src.database.errors import first_row
from src.database.models import Player


class PlayerManager:
    """Manages player records in Supabase."""

    def __init__(self, client: Client) -> None:
        self.client = client
        self.table = client.table("players")

    def add(self, game_id: str, name: str, turn_order: int) -> Player:
        """Add a player to a game at a fixed draft position."""
        data = (
            self.table
            .insert({
                "draft_game_id": game_id,
                "name": name,
                "turn_order": turn_order,
            })
            .execute()
        )
        return Player.model_validate(first_row(data.data, f"Adding player {name!r}"))

    def list_by_game(self, game_id: str) -> list[Player]:
        """Get all players in a game, ordered by turn."""
        data = (
            self.table
            .select("*")
            .eq("draft_game_id", game_id)
            .order("turn_order")
            .execute()
        )
        return [Player.model_validate(row) for row in data.data]

    def delete(self, player_id: str) -> None:
        """Remove a player."""
        self.table.delete().eq("id", player_id).execute()
