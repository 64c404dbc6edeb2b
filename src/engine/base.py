"""
Hear Me Out - Game Engine Base Classes

This module defines the value types shared by the draft and scoring engines.
All classes are immutable (frozen dataclasses) so a snapshot handed to an
engine can never be changed underneath it.
"""

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Iterable


class GameStatus(Enum):
    """Lifecycle of a draft game."""
    DRAFTING = "drafting"
    HEAR_ME_OUT = "hear_me_out"
    VOTING = "voting"
    COMPLETE = "complete"

    def next_status(self) -> "GameStatus | None":
        """The single legal successor, or None once the game is complete."""
        order = list(GameStatus)
        index = order.index(self)
        if index + 1 < len(order):
            return order[index + 1]
        return None


@dataclass(frozen=True)
class Player:
    """
    A participant in a draft game.

    Attributes:
        id: Player identity
        name: Display name
        turn_order: 0-indexed draft position, assigned once at draft start
    """
    id: str
    name: str
    turn_order: int


@dataclass(frozen=True)
class Entry:
    """
    A member of the pool available for picking.

    Attributes:
        id: Entry identity
        name: Display name
        image_url: Optional image reference
    """
    id: str
    name: str
    image_url: str | None = None


@dataclass(frozen=True)
class Pick:
    """
    A single draft selection.

    Attributes:
        id: Pick identity
        game_id: Owning draft game
        player_id: Player who made the pick
        entry_id: Entry that was picked
        pick_number: 1-indexed position in the game's pick sequence
        created_at: When the pick was recorded
    """
    id: str
    game_id: str
    player_id: str
    entry_id: str
    pick_number: int
    created_at: datetime | None = None


@dataclass(frozen=True)
class Vote:
    """
    One ranked choice on a voter's ballot.

    Attributes:
        id: Vote identity
        game_id: Owning draft game
        voter_player_id: Player who cast the vote
        voted_player_id: Player being ranked
        rank: 1 is best
    """
    id: str
    game_id: str
    voter_player_id: str
    voted_player_id: str
    rank: int


@dataclass(frozen=True)
class VoteResult:
    """
    A player's line on the final leaderboard.

    Attributes:
        player_id: Player identity
        player_name: Display name
        score: Total ranked-voting points
        entries: Entries the player drafted, in pool order
    """
    player_id: str
    player_name: str
    score: int
    entries: tuple[Entry, ...] = field(default_factory=tuple)


@dataclass(frozen=True)
class DraftState:
    """
    Snapshot of a draft in progress.

    Attributes:
        players: Players ordered by turn_order
        entries: The full entry pool in original order
        picks: Recorded picks ordered by pick_number
        current_pick_number: 1-indexed number of the pick on the clock
        total_picks: Number of picks the draft will hold
    """
    players: tuple[Player, ...]
    entries: tuple[Entry, ...]
    picks: tuple[Pick, ...]
    current_pick_number: int
    total_picks: int

    @property
    def player_count(self) -> int:
        return len(self.players)

    @classmethod
    def from_records(
        cls,
        players: Iterable[Player],
        entries: Iterable[Entry],
        picks: Iterable[Pick],
    ) -> "DraftState":
        """Assemble a snapshot from loaded records."""
        # snake_draft imports this module
        from src.engine.snake_draft import DraftEngine

        ordered_players = tuple(sorted(players, key=lambda p: p.turn_order))
        pool = tuple(entries)
        ordered_picks = tuple(sorted(picks, key=lambda p: p.pick_number))
        return cls(
            players=ordered_players,
            entries=pool,
            picks=ordered_picks,
            current_pick_number=len(ordered_picks) + 1,
            total_picks=DraftEngine.total_picks(len(pool), len(ordered_players)),
        )

    def with_pick(self, pick: Pick) -> "DraftState":
        """Return a new snapshot with the pick applied."""
        return DraftState(
            players=self.players,
            entries=self.entries,
            picks=self.picks + (pick,),
            current_pick_number=self.current_pick_number + 1,
            total_picks=self.total_picks,
        )
