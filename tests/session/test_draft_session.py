"""Tests for src/session/draft.py - DraftSession over an in-memory repository."""

import random

import pytest

from src.database.errors import PersistenceError, PickConflictError
from src.engine.base import GameStatus, Player
from src.session.draft import DraftSession
from src.session.errors import DraftCreationError, DraftError, GameNotFoundError


@pytest.fixture
def session(repository):
    return DraftSession(repository, "game-1")


@pytest.fixture
def started(session, fixed_rng):
    """Three players seated Bo, Cy, Ann over a 10-entry pool."""
    session.start_draft(["Ann", "Bo", "Cy"], rng=fixed_rng)
    return session


# ── load ────────────────────────────────────────────────────────────────

class TestLoad:
    def test_unknown_game_raises(self, repository):
        with pytest.raises(GameNotFoundError):
            DraftSession(repository, "missing").load()

    def test_corrupt_turn_order_raises(self, repository, session):
        repository.players = [
            Player(id="a", name="A", turn_order=0),
            Player(id="b", name="B", turn_order=2),
        ]
        with pytest.raises(DraftError, match="corrupt turn order"):
            session.load()

    def test_empty_game(self, session):
        state = session.load()
        assert state.players == ()
        assert state.total_picks == 0
        assert session.status is GameStatus.DRAFTING
        assert session.current_player is None
        assert session.is_complete is True


# ── start_draft ─────────────────────────────────────────────────────────

class TestStartDraft:
    def test_assigns_shuffled_turn_order(self, session, fixed_rng):
        players = session.start_draft(["Ann", "Bo", "Cy"], rng=fixed_rng)
        assert [(p.name, p.turn_order) for p in players] == [("Bo", 0), ("Cy", 1), ("Ann", 2)]

    def test_reloads_snapshot(self, started):
        assert started.state.total_picks == 9
        assert started.current_player.name == "Bo"

    def test_seeded_shuffle_is_reproducible(self, repository_factory):
        first = DraftSession(repository_factory(entry_count=8), "game-1")
        second = DraftSession(repository_factory(entry_count=8), "game-1")
        names = ["Ann", "Bo", "Cy", "Di"]
        a = first.start_draft(names, rng=random.Random(7))
        b = second.start_draft(names, rng=random.Random(7))
        assert [p.name for p in a] == [p.name for p in b]

    def test_invalid_names_raise_value_error(self, session):
        with pytest.raises(ValueError):
            session.start_draft(["Ann", "ann"])

    def test_second_start_raises(self, started):
        with pytest.raises(DraftCreationError, match="already has players"):
            started.start_draft(["Di"])

    def test_not_drafting_raises(self, repository, session):
        repository.statuses["game-1"] = GameStatus.VOTING
        with pytest.raises(DraftCreationError, match="not drafting"):
            session.start_draft(["Ann"])

    def test_persistence_failure_raises_creation_error(self, repository, session, fixed_rng):
        repository.fail_on_player = "Cy"
        with pytest.raises(DraftCreationError, match="Cy") as excinfo:
            session.start_draft(["Ann", "Bo", "Cy"], rng=fixed_rng)
        assert excinfo.value.__cause__ is not None
        assert repository.players == []

    def test_failed_start_can_be_retried(self, repository, session, fixed_rng):
        repository.fail_on_player = "Cy"
        with pytest.raises(DraftCreationError):
            session.start_draft(["Ann", "Bo", "Cy"], rng=fixed_rng)

        fresh = DraftSession(repository, "game-1")
        assert fresh.current_player is None
        assert fresh.make_pick("e0") is None

        repository.fail_on_player = None
        players = fresh.start_draft(["Ann", "Bo", "Cy"], rng=fixed_rng)
        assert [p.name for p in players] == ["Bo", "Cy", "Ann"]
        assert repository.picks == []


# ── make_pick ───────────────────────────────────────────────────────────

class TestMakePick:
    def test_records_pick_for_current_player(self, started, repository):
        pick = started.make_pick("e3")

        assert pick.pick_number == 1
        assert pick.entry_id == "e3"
        assert pick.player_id == started.state.players[0].id
        assert repository.picks == [pick]
        assert started.current_player.name == "Cy"

    def test_snake_turns_through_the_draft(self, started):
        names = []
        for entry in [f"e{i}" for i in range(9)]:
            names.append(started.current_player.name)
            assert started.make_pick(entry) is not None
        assert names == ["Bo", "Cy", "Ann", "Ann", "Cy", "Bo", "Bo", "Cy", "Ann"]

    def test_taken_entry_rejected(self, started, repository):
        started.make_pick("e0")
        assert started.make_pick("e0") is None
        assert len(repository.picks) == 1

    def test_unknown_entry_rejected(self, started, repository):
        assert started.make_pick("nope") is None
        assert repository.picks == []

    def test_completion_moves_to_hear_me_out(self, started, repository):
        for i in range(9):
            started.make_pick(f"e{i}")

        assert started.is_complete is True
        assert started.status is GameStatus.HEAR_ME_OUT
        assert repository.status_history == [GameStatus.HEAR_ME_OUT]
        assert started.current_player is None
        assert [e.id for e in started.available_entries] == ["e9"]

    def test_pick_after_completion_is_rejected(self, started, repository):
        for i in range(9):
            started.make_pick(f"e{i}")
        assert started.make_pick("e9") is None
        assert len(repository.picks) == 9
        assert repository.status_history == [GameStatus.HEAR_ME_OUT]

    def test_no_pick_outside_drafting(self, started, repository):
        repository.statuses["game-1"] = GameStatus.VOTING
        started.load()
        assert started.make_pick("e0") is None

    def test_lost_race_reloads_and_returns_none(self, started, repository):
        rival = DraftSession(repository, "game-1")
        rival.load()
        assert rival.make_pick("e5") is not None

        # started still holds the stale snapshot for pick 1
        assert started.make_pick("e1") is None
        assert started.state.current_pick_number == 2
        assert len(repository.picks) == 1

    def test_conflict_error_is_not_raised(self, started, repository, monkeypatch):
        def conflict(*args, **kwargs):
            raise PickConflictError("taken")

        monkeypatch.setattr(repository, "append_pick", conflict)
        assert started.make_pick("e0") is None

    def test_failed_status_update_is_repaired_on_load(self, started, repository):
        for i in range(8):
            started.make_pick(f"e{i}")
        repository.fail_status_updates = 1
        with pytest.raises(PersistenceError):
            started.make_pick("e8")
        assert len(repository.picks) == 9
        assert repository.statuses["game-1"] is GameStatus.DRAFTING

        fresh = DraftSession(repository, "game-1")
        fresh.load()

        assert fresh.status is GameStatus.HEAR_ME_OUT
        assert repository.status_history == [GameStatus.HEAR_ME_OUT]

    def test_load_leaves_unfinished_draft_alone(self, started, repository):
        started.make_pick("e0")
        DraftSession(repository, "game-1").load()
        assert repository.status_history == []
