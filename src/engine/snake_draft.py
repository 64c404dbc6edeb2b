"""
Hear Me Out - Snake Draft Engine

Turn order and pick legality for a multi-round snake draft.

Draft Rules:
- Players pick in turn_order during even rounds (0, 1, ..., n-1)
- Direction reverses on odd rounds (n-1, ..., 1, 0)
- Only complete rounds are drafted; leftover entries are never pickable
- An entry can be picked at most once per game

All methods are stateless class methods operating on immutable snapshots.
Degenerate input (no players, no entries) yields empty values, never errors.
"""

import random
from typing import Protocol, Sequence, TypeVar

from src.engine.base import DraftState, Entry, Pick, Player

T = TypeVar("T")


class RandomSource(Protocol):
    """Anything that can pick an integer in [a, b], like random.Random."""

    def randint(self, a: int, b: int) -> int: ...


class DraftEngine:
    """
    Stateless engine for snake draft sequencing.

    All methods are class methods operating on immutable data.
    State is passed in and returned, never stored.
    """

    @classmethod
    def total_picks(cls, entry_count: int, player_count: int) -> int:
        """
        Number of picks that fit in complete rounds.

        Args:
            entry_count: Size of the entry pool
            player_count: Number of players in the game

        Returns:
            floor(entry_count / player_count) * player_count, or 0 with no players
        """
        if player_count <= 0:
            return 0
        return (entry_count // player_count) * player_count

    @classmethod
    def round_index(cls, state: DraftState) -> int:
        """0-indexed round of the pick currently on the clock."""
        if state.player_count == 0:
            return 0
        return (state.current_pick_number - 1) // state.player_count

    @classmethod
    def is_forward_round(cls, state: DraftState) -> bool:
        """True when the current round scans turn order ascending."""
        return cls.round_index(state) % 2 == 0

    @classmethod
    def _position_for_pick(cls, pick_number: int, player_count: int) -> int:
        round_index = (pick_number - 1) // player_count
        position_in_round = (pick_number - 1) % player_count
        if round_index % 2 == 0:
            return position_in_round
        return player_count - 1 - position_in_round

    @classmethod
    def current_player(cls, state: DraftState) -> Player | None:
        """
        Player on the clock for the current pick.

        Args:
            state: Draft snapshot with players ordered by turn_order

        Returns:
            The picking player, or None once the draft is over
        """
        if cls.is_draft_complete(state):
            return None
        if state.current_pick_number > state.total_picks:
            return None
        if state.player_count == 0 or state.current_pick_number < 1:
            return None

        position = cls._position_for_pick(state.current_pick_number, state.player_count)
        return state.players[position]

    @classmethod
    def draft_order(cls, player_count: int, total_picks: int) -> tuple[int, ...]:
        """
        Turn-order position on the clock for every pick.

        Args:
            player_count: Number of players in the game
            total_picks: Number of picks in the draft

        Returns:
            Tuple where index i holds the position picking at pick number i + 1
        """
        if player_count <= 0:
            return ()
        return tuple(
            cls._position_for_pick(pick_number, player_count)
            for pick_number in range(1, total_picks + 1)
        )

    @classmethod
    def next_pick_number(cls, state: DraftState) -> int:
        return state.current_pick_number + 1

    @classmethod
    def taken_entry_ids(cls, state: DraftState) -> frozenset[str]:
        """Entry ids referenced by existing picks."""
        return frozenset(pick.entry_id for pick in state.picks)

    @classmethod
    def available_entries(cls, state: DraftState) -> tuple[Entry, ...]:
        """Entries still in the pool, in original pool order."""
        taken = cls.taken_entry_ids(state)
        return tuple(entry for entry in state.entries if entry.id not in taken)

    @classmethod
    def is_draft_complete(cls, state: DraftState) -> bool:
        """True once every pick has been made."""
        return (
            len(state.picks) >= state.total_picks
            or state.current_pick_number > state.total_picks
        )

    @classmethod
    def can_make_pick(cls, state: DraftState, entry_id: str) -> bool:
        """
        Check whether an entry may be picked now.

        Does not verify that entry_id belongs to the pool.

        Args:
            state: Draft snapshot
            entry_id: Entry the current player wants

        Returns:
            False if the draft is complete or the entry is already taken
        """
        if cls.is_draft_complete(state):
            return False
        return entry_id not in cls.taken_entry_ids(state)

    @classmethod
    def initialize_turn_order(
        cls,
        players: Sequence[T],
        rng: RandomSource | None = None,
    ) -> tuple[T, ...]:
        """
        Shuffle players into a random draft order (Fisher-Yates).

        Args:
            players: Players (or player names) to order
            rng: Optional random source (for testing); defaults to the random module

        Returns:
            A permutation of the input players
        """
        source = rng if rng is not None else random
        shuffled = list(players)
        for i in range(len(shuffled) - 1, 0, -1):
            j = source.randint(0, i)
            shuffled[i], shuffled[j] = shuffled[j], shuffled[i]
        return tuple(shuffled)

    @classmethod
    def player_picks(cls, state: DraftState, player_id: str) -> tuple[Pick, ...]:
        """All picks by one player, by ascending pick_number."""
        return tuple(sorted(
            (pick for pick in state.picks if pick.player_id == player_id),
            key=lambda pick: pick.pick_number,
        ))
