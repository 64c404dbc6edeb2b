"""
Hear Me Out - Test Configuration and Fixtures

Common fixtures and test data for all test modules.
"""

import itertools

import pytest

from src.database.errors import PersistenceError, PickConflictError, VoteConflictError
from src.engine.base import DraftState, Entry, GameStatus, Pick, Player, Vote
from src.engine.snake_draft import DraftEngine


# =============================================================================
# ENGINE VALUE FIXTURES
# =============================================================================

def _players(count: int) -> tuple[Player, ...]:
    return tuple(Player(id=f"p{i}", name=f"Player {i}", turn_order=i) for i in range(count))


def _entries(count: int) -> tuple[Entry, ...]:
    return tuple(Entry(id=f"e{i}", name=f"Entry {i}") for i in range(count))


def _state(
    player_count: int,
    entry_count: int,
    picked_entry_ids: tuple[str, ...] = (),
) -> DraftState:
    """Snapshot with picks made in snake order for the given entries."""
    state = DraftState.from_records(_players(player_count), _entries(entry_count), ())
    for entry_id in picked_entry_ids:
        player = DraftEngine.current_player(state)
        state = state.with_pick(Pick(
            id=f"pick{state.current_pick_number}",
            game_id="game-1",
            player_id=player.id,
            entry_id=entry_id,
            pick_number=state.current_pick_number,
        ))
    return state


@pytest.fixture
def make_players():
    """Players p0..pN-1 seated in turn order."""
    return _players


@pytest.fixture
def make_entries():
    """Entries e0..eN-1 in pool order."""
    return _entries


@pytest.fixture
def make_state():
    """Snapshot with the given entries already picked in snake order."""
    return _state


class FixedRandom:
    """Random source that always returns the low bound."""

    def randint(self, a: int, b: int) -> int:
        return a


@pytest.fixture
def fixed_rng() -> FixedRandom:
    return FixedRandom()


# =============================================================================
# IN-MEMORY REPOSITORY
# =============================================================================

class InMemoryDraftRepository:
    """DraftRepository over plain lists, enforcing the picks uniqueness rules."""

    def __init__(self, game_id: str = "game-1", entry_count: int = 0) -> None:
        self.statuses: dict[str, GameStatus] = {game_id: GameStatus.DRAFTING}
        self.players: list[Player] = []
        self.entries: list[Entry] = list(_entries(entry_count))
        self.picks: list[Pick] = []
        self.votes: list[Vote] = []
        self.status_history: list[GameStatus] = []
        self.fail_on_player: str | None = None
        self.fail_status_updates = 0
        self._ids = itertools.count(1)

    def get_status(self, game_id: str) -> GameStatus | None:
        return self.statuses.get(game_id)

    def get_players(self, game_id: str) -> list[Player]:
        return sorted(self.players, key=lambda p: p.turn_order)

    def get_entries(self, game_id: str) -> list[Entry]:
        return list(self.entries)

    def get_picks(self, game_id: str) -> list[Pick]:
        return sorted(self.picks, key=lambda p: p.pick_number)

    def get_votes(self, game_id: str) -> list[Vote]:
        return list(self.votes)

    def add_player(self, game_id: str, name: str, turn_order: int) -> Player:
        if name == self.fail_on_player:
            raise PersistenceError(f"Adding player {name!r} returned no rows")
        player = Player(id=f"player-{next(self._ids)}", name=name, turn_order=turn_order)
        self.players.append(player)
        return player

    def delete_player(self, player_id: str) -> None:
        self.players = [p for p in self.players if p.id != player_id]

    def append_pick(self, game_id: str, player_id: str, entry_id: str, pick_number: int) -> Pick:
        for existing in self.picks:
            if existing.pick_number == pick_number or existing.entry_id == entry_id:
                raise PickConflictError(f"Pick {pick_number} conflicts")
        pick = Pick(
            id=f"pick-{next(self._ids)}",
            game_id=game_id,
            player_id=player_id,
            entry_id=entry_id,
            pick_number=pick_number,
        )
        self.picks.append(pick)
        return pick

    def append_vote(self, game_id: str, voter_player_id: str, rank: int, voted_player_id: str) -> Vote:
        for existing in self.votes:
            if existing.voter_player_id == voter_player_id and existing.rank == rank:
                raise VoteConflictError(f"Rank {rank} already cast by {voter_player_id}")
        vote = Vote(
            id=f"vote-{next(self._ids)}",
            game_id=game_id,
            voter_player_id=voter_player_id,
            voted_player_id=voted_player_id,
            rank=rank,
        )
        self.votes.append(vote)
        return vote

    def update_status(self, game_id: str, status: GameStatus) -> None:
        if self.fail_status_updates:
            self.fail_status_updates -= 1
            raise PersistenceError(f"Updating status of game {game_id} returned no rows")
        self.statuses[game_id] = status
        self.status_history.append(status)


@pytest.fixture
def repository_factory():
    """Build further in-memory repositories within one test."""
    return InMemoryDraftRepository


@pytest.fixture
def repository() -> InMemoryDraftRepository:
    """Repository for game-1 with a 10-entry pool and no players yet."""
    return InMemoryDraftRepository(entry_count=10)
