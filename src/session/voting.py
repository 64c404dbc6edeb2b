"""
Hear Me Out - Voting Session

Drives the ranked-voting phase of one game: opens voting after the
"hear me out" pitches, records one ballot per player, and closes the
game once everyone has voted.
"""

from __future__ import annotations

import logging
from typing import Sequence

from src.database.errors import VoteConflictError
from src.database.repository import DraftRepository
from src.engine.base import Entry, GameStatus, Pick, Player, Vote, VoteResult
from src.engine.scoring import ScoringEngine
from src.engine.validators import validate_ballot
from src.session.errors import BallotError, GameNotFoundError, InvalidStatusError

logger = logging.getLogger(__name__)


class VotingSession:
    """Orchestrates the voting phase of a single game."""

    def __init__(self, repository: DraftRepository, game_id: str) -> None:
        self._repository = repository
        self.game_id = game_id
        self._status: GameStatus | None = None
        self._players: tuple[Player, ...] = ()
        self._entries: tuple[Entry, ...] = ()
        self._picks: tuple[Pick, ...] = ()
        self._votes: tuple[Vote, ...] = ()
        self._loaded = False

    def load(self) -> None:
        """Fetch fresh players, picks, entries and votes.

        Raises:
            GameNotFoundError: If the game does not exist.
        """
        status = self._repository.get_status(self.game_id)
        if status is None:
            raise GameNotFoundError(f"Game {self.game_id} not found")

        self._status = status
        self._players = tuple(
            sorted(self._repository.get_players(self.game_id), key=lambda p: p.turn_order)
        )
        self._entries = tuple(self._repository.get_entries(self.game_id))
        self._picks = tuple(self._repository.get_picks(self.game_id))
        self._votes = tuple(self._repository.get_votes(self.game_id))
        self._loaded = True

    def _ensure_loaded(self) -> None:
        if not self._loaded:
            self.load()

    @property
    def status(self) -> GameStatus:
        self._ensure_loaded()
        return self._status  # type: ignore[return-value]

    @property
    def players(self) -> tuple[Player, ...]:
        self._ensure_loaded()
        return self._players

    @property
    def votes(self) -> tuple[Vote, ...]:
        self._ensure_loaded()
        return self._votes

    @property
    def ballot_size(self) -> int:
        """Number of ranks each player fills in."""
        return ScoringEngine.votes_per_player(len(self.players))

    def has_voted(self, player_id: str) -> bool:
        return any(vote.voter_player_id == player_id for vote in self.votes)

    def pending_voters(self) -> tuple[Player, ...]:
        """Players who have not submitted a ballot yet."""
        voted = {vote.voter_player_id for vote in self.votes}
        return tuple(player for player in self.players if player.id not in voted)

    def _advance(self) -> None:
        status = self.status.next_status()
        self._repository.update_status(self.game_id, status)
        self._status = status

    def begin_voting(self) -> bool:
        """Open voting once the pitches are over.

        Returns:
            True if the game moved to voting, False if it was not in
            the "hear me out" phase.
        """
        if self.status is not GameStatus.HEAR_ME_OUT:
            return False
        self._advance()
        logger.info("Voting opened for game %s", self.game_id)
        return True

    def submit_ballot(self, voter_id: str, ranked_player_ids: Sequence[str]) -> tuple[Vote, ...]:
        """Record a player's ranked ballot.

        The game is re-read first and the votes again after writing, so
        ballots arriving through other sessions are seen.

        Args:
            voter_id: Player casting the ballot.
            ranked_player_ids: Opponents, best first.

        Returns:
            The recorded votes, rank 1 first.

        Raises:
            InvalidStatusError: If the game is not in the voting phase.
            BallotError: If the voter is unknown, already voted, or the
                ballot is malformed.
        """
        self.load()
        if self.status is not GameStatus.VOTING:
            raise InvalidStatusError(
                f"Game {self.game_id} is {self.status.value}, not voting"
            )

        player_ids = {player.id for player in self.players}
        if voter_id not in player_ids:
            raise BallotError(f"Player {voter_id} is not in game {self.game_id}")
        if self.has_voted(voter_id):
            raise BallotError(f"Player {voter_id} has already voted")

        try:
            ballot = validate_ballot(ranked_player_ids, voter_id, player_ids, self.ballot_size)
        except ValueError as e:
            raise BallotError(str(e)) from e

        try:
            recorded = tuple(
                self._repository.append_vote(self.game_id, voter_id, rank, voted_player_id)
                for rank, voted_player_id in enumerate(ballot, start=1)
            )
        except VoteConflictError as e:
            raise BallotError(f"Player {voter_id} has already voted") from e
        self._votes = tuple(self._repository.get_votes(self.game_id))
        logger.info("Ballot recorded for player %s in game %s", voter_id, self.game_id)

        if not self.pending_voters():
            self._advance()
            logger.info("All ballots in for game %s", self.game_id)

        return recorded

    def results(self) -> tuple[VoteResult, ...]:
        """Current leaderboard, highest score first."""
        self._ensure_loaded()
        return ScoringEngine.calculate_scores(
            self._votes, self._players, self._picks, self._entries
        )

    def winner(self) -> VoteResult | None:
        return ScoringEngine.get_winner(self.results())
