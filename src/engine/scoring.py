"""
Hear Me Out - Ranked Voting Engine

Scores the voting phase that follows a draft.

Voting Rules:
- Every player ranks their opponents, up to a ballot of 4
- Rank 1 earns ballot-size points, each lower rank one point less
- Votes for players outside the game are ignored
- Leaderboard is sorted by score; ties keep player order
"""

from typing import ClassVar, Sequence

from src.engine.base import Entry, Pick, Player, Vote, VoteResult


class ScoringEngine:
    """Stateless engine for ranked-vote scoring."""

    MAX_BALLOT_SIZE: ClassVar[int] = 4

    @classmethod
    def votes_per_player(cls, total_players: int) -> int:
        """
        Ballot size for a game.

        Args:
            total_players: Number of players in the game

        Returns:
            One slot per opponent, clamped to 1..MAX_BALLOT_SIZE
        """
        return min(cls.MAX_BALLOT_SIZE, max(1, total_players - 1))

    @classmethod
    def points_for_rank(cls, rank: int, max_votes: int) -> int:
        """Points for a rank; ranks past max_votes go non-positive."""
        return max_votes - rank + 1

    @classmethod
    def calculate_scores(
        cls,
        votes: Sequence[Vote],
        players: Sequence[Player],
        picks: Sequence[Pick],
        entries: Sequence[Entry],
    ) -> tuple[VoteResult, ...]:
        """
        Build the leaderboard.

        Args:
            votes: Every vote cast in the game
            players: Players in the game; their order breaks score ties
            picks: Every pick made in the draft
            entries: The entry pool, in original order

        Returns:
            One VoteResult per player, highest score first
        """
        max_votes = cls.votes_per_player(len(players))

        scores: dict[str, int] = {player.id: 0 for player in players}
        for vote in votes:
            points = cls.points_for_rank(vote.rank, max_votes)
            scores[vote.voted_player_id] = scores.get(vote.voted_player_id, 0) + points

        results = []
        for player in players:
            entry_ids = {pick.entry_id for pick in picks if pick.player_id == player.id}
            results.append(VoteResult(
                player_id=player.id,
                player_name=player.name,
                score=scores[player.id],
                entries=tuple(entry for entry in entries if entry.id in entry_ids),
            ))

        # sorted() is stable with reverse=True, so ties keep player order
        return tuple(sorted(results, key=lambda result: result.score, reverse=True))

    @classmethod
    def get_winner(cls, results: Sequence[VoteResult]) -> VoteResult | None:
        """First result of an already sorted leaderboard, if any."""
        if not results:
            return None
        return results[0]
