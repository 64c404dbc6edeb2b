"""
Hear Me Out - Vote Manager

Append and read operations for the `votes` table.
"""

from postgrest.exceptions import APIError
from supabase import Client

from src.database.errors import VoteConflictError, first_row, is_unique_violation
from src.database.models import Vote


class VoteManager:
    """Manages ranked votes in Supabase."""

    def __init__(self, client: Client) -> None:
        self.client = client
        self.table = client.table("votes")

    def submit(self, game_id: str, voter_player_id: str, rank: int, voted_player_id: str) -> Vote:
        """
        Record one ranked choice.

        Raises:
            VoteConflictError: If the voter already cast this rank in this game
        """
        try:
            data = (
                self.table
                .insert({
                    "draft_game_id": game_id,
                    "voter_player_id": voter_player_id,
                    "rank": rank,
                    "voted_player_id": voted_player_id,
                })
                .execute()
            )
        except APIError as e:
            if is_unique_violation(e):
                raise VoteConflictError(
                    f"Player {voter_player_id} already cast rank {rank} in game {game_id}"
                ) from e
            raise
        return Vote.model_validate(first_row(data.data, f"Submitting rank {rank} vote"))

    def list_by_game(self, game_id: str) -> list[Vote]:
        """Get all votes in a game, best rank first."""
        data = (
            self.table
            .select("*")
            .eq("draft_game_id", game_id)
            .order("rank")
            .execute()
        )
        return [Vote.model_validate(row) for row in data.data]

    def list_by_voter(self, game_id: str, voter_player_id: str) -> list[Vote]:
        """Get one player's ballot."""
        data = (
            self.table
            .select("*")
            .eq("draft_game_id", game_id)
            .eq("voter_player_id", voter_player_id)
            .order("rank")
            .execute()
        )
        return [Vote.model_validate(row) for row in data.data]
