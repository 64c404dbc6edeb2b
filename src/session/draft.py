"""
Hear Me Out - Draft Session

Drives the drafting phase of one game: seats players in a shuffled turn
order, accepts picks from whoever is on the clock, and moves the game on
to "hear me out" once the last pick is in.

The session holds the canonical snapshot and replaces it after every
change; the engine only ever sees immutable DraftState values.
"""

from __future__ import annotations

import logging
from typing import Sequence

from postgrest.exceptions import APIError

from src.database.errors import PersistenceError, PickConflictError
from src.database.repository import DraftRepository
from src.engine.base import DraftState, Entry, GameStatus, Pick, Player
from src.engine.snake_draft import DraftEngine, RandomSource
from src.engine.validators import validate_player_names, validate_turn_order
from src.session.errors import DraftCreationError, DraftError, GameNotFoundError

logger = logging.getLogger(__name__)


class DraftSession:
    """Orchestrates the drafting phase of a single game."""

    def __init__(self, repository: DraftRepository, game_id: str) -> None:
        self._repository = repository
        self.game_id = game_id
        self._state: DraftState | None = None
        self._status: GameStatus | None = None

    def load(self) -> DraftState:
        """Fetch a fresh snapshot of the game.

        A game whose picks are all in but whose status is still drafting
        is moved on to "hear me out" here.

        Raises:
            GameNotFoundError: If the game does not exist.
            DraftError: If the stored turn orders are not 0..N-1.
        """
        status = self._repository.get_status(self.game_id)
        if status is None:
            raise GameNotFoundError(f"Game {self.game_id} not found")

        try:
            players = validate_turn_order(self._repository.get_players(self.game_id))
        except ValueError as e:
            raise DraftError(f"Game {self.game_id} has a corrupt turn order: {e}") from e

        state = DraftState.from_records(
            players,
            self._repository.get_entries(self.game_id),
            self._repository.get_picks(self.game_id),
        )
        self._status = status
        self._state = state
        if (
            status is GameStatus.DRAFTING
            and state.total_picks > 0
            and DraftEngine.is_draft_complete(state)
        ):
            # the last pick landed but the status update did not
            logger.warning("Game %s has all picks but is still drafting", self.game_id)
            self._advance()
        logger.debug(
            "Loaded game %s: %d players, %d entries, %d/%d picks",
            self.game_id,
            state.player_count,
            len(state.entries),
            len(state.picks),
            state.total_picks,
        )
        return state

    # -- Snapshot views --------------------------------------------------

    @property
    def state(self) -> DraftState:
        if self._state is None:
            return self.load()
        return self._state

    @property
    def status(self) -> GameStatus:
        if self._status is None:
            self.load()
        return self._status  # type: ignore[return-value]

    @property
    def current_player(self) -> Player | None:
        """Player on the clock, or None outside the drafting phase."""
        state = self.state
        if self.status is not GameStatus.DRAFTING:
            return None
        return DraftEngine.current_player(state)

    @property
    def available_entries(self) -> tuple[Entry, ...]:
        return DraftEngine.available_entries(self.state)

    @property
    def is_complete(self) -> bool:
        return DraftEngine.is_draft_complete(self.state)

    # -- Commands --------------------------------------------------------

    def _advance(self) -> None:
        status = self.status.next_status()
        self._repository.update_status(self.game_id, status)
        self._status = status

    def start_draft(
        self,
        player_names: Sequence[str],
        rng: RandomSource | None = None,
    ) -> tuple[Player, ...]:
        """Seat players in a random turn order.

        Args:
            player_names: Names of the players joining the draft.
            rng: Optional random source (for testing).

        Returns:
            The seated players, ordered by turn_order.

        Raises:
            ValueError: If the names are invalid.
            DraftCreationError: If the game already has players or a
                player could not be saved. Players seated before the
                failure are removed again.
        """
        names = validate_player_names(player_names)

        if self.state.players:
            raise DraftCreationError(f"Game {self.game_id} already has players")
        if self.status is not GameStatus.DRAFTING:
            raise DraftCreationError(f"Game {self.game_id} is {self.status.value}, not drafting")

        seated: list[Player] = []
        for turn_order, name in enumerate(DraftEngine.initialize_turn_order(names, rng)):
            try:
                seated.append(self._repository.add_player(self.game_id, name, turn_order))
            except (APIError, PersistenceError) as e:
                logger.error("Failed to add player %r to game %s: %s", name, self.game_id, e)
                self._remove_players(seated)
                raise DraftCreationError(f"Failed to add player {name!r}") from e

        state = self.load()
        logger.info("Draft started for game %s with %d players", self.game_id, state.player_count)
        return state.players

    def make_pick(self, entry_id: str) -> Pick | None:
        """Record a pick for the player on the clock.

        Returns:
            The recorded Pick, or None if the pick was not accepted
            (wrong phase, draft over, entry taken or unknown, or another
            pick won the race for this pick number).
        """
        player = self.current_player
        if player is None:
            return None

        state = self.state
        if not DraftEngine.can_make_pick(state, entry_id):
            logger.info("Rejected pick of entry %s in game %s", entry_id, self.game_id)
            return None
        if all(entry.id != entry_id for entry in state.entries):
            logger.warning("Entry %s is not in the pool of game %s", entry_id, self.game_id)
            return None

        try:
            pick = self._repository.append_pick(
                self.game_id, player.id, entry_id, state.current_pick_number
            )
        except PickConflictError:
            logger.warning(
                "Pick %d of game %s was taken concurrently, reloading",
                state.current_pick_number,
                self.game_id,
            )
            self.load()
            return None

        self._state = state.with_pick(pick)
        logger.info(
            "Pick %d/%d in game %s: %s took %s",
            pick.pick_number,
            state.total_picks,
            self.game_id,
            player.name,
            entry_id,
        )

        if DraftEngine.is_draft_complete(self._state):
            self._advance()
            logger.info("Draft complete for game %s", self.game_id)

        return pick

    def _remove_players(self, players: Sequence[Player]) -> None:
        """Undo a partial start so the game can be started again."""
        for player in players:
            try:
                self._repository.delete_player(player.id)
            except (APIError, PersistenceError):
                logger.exception(
                    "Could not remove player %s from game %s", player.id, self.game_id
                )
        self._state = None
