"""
Hear Me Out - Input Validation Utilities

Validation for input arriving at the session layer. All validators
either return validated data or raise descriptive ValueError exceptions.
The engines themselves never raise; these run before anything is persisted.
"""

from typing import Collection, Sequence

from src.engine.base import Player

MAX_NAME_LENGTH = 50


def validate_player_names(names: Sequence[str]) -> tuple[str, ...]:
    """
    Validate and normalize player names for a new draft.

    Args:
        names: Names as entered

    Returns:
        Stripped names as a tuple

    Raises:
        ValueError: If there are no names, a name is blank or too long,
            or two names collide ignoring case
    """
    if not names:
        raise ValueError("At least one player is required.")

    cleaned = []
    seen: set[str] = set()
    for i, name in enumerate(names):
        if not isinstance(name, str):
            raise ValueError(f"Player name at index {i} must be a string, got {type(name).__name__}.")
        stripped = name.strip()
        if not stripped:
            raise ValueError(f"Player name at index {i} is blank.")
        if len(stripped) > MAX_NAME_LENGTH:
            raise ValueError(
                f"Player name at index {i} is {len(stripped)} characters, "
                f"must be at most {MAX_NAME_LENGTH}."
            )
        key = stripped.casefold()
        if key in seen:
            raise ValueError(f"Duplicate player name: {stripped!r}.")
        seen.add(key)
        cleaned.append(stripped)

    return tuple(cleaned)


def validate_turn_order(players: Sequence[Player]) -> tuple[Player, ...]:
    """
    Validate that turn orders form a contiguous 0..N-1 set.

    Args:
        players: Players of one game

    Returns:
        Players sorted by turn_order

    Raises:
        ValueError: If a turn order is duplicated or missing
    """
    ordered = tuple(sorted(players, key=lambda p: p.turn_order))
    actual = [p.turn_order for p in ordered]
    expected = list(range(len(ordered)))
    if actual != expected:
        raise ValueError(f"Turn orders must be exactly {expected}, got {actual}.")
    return ordered


def validate_ballot(
    ranked_player_ids: Sequence[str],
    voter_id: str,
    eligible_player_ids: Collection[str],
    ballot_size: int,
) -> tuple[str, ...]:
    """
    Validate a ranked ballot.

    Args:
        ranked_player_ids: Player ids, best first
        voter_id: Player casting the ballot
        eligible_player_ids: Players in the game
        ballot_size: Number of ranks every ballot must fill

    Returns:
        The ballot as a tuple

    Raises:
        ValueError: If the ballot has the wrong size, repeats a player,
            ranks the voter, or names someone outside the game
    """
    ballot = tuple(ranked_player_ids)

    if len(ballot) != ballot_size:
        raise ValueError(f"Ballot must rank exactly {ballot_size} players, got {len(ballot)}.")

    if len(set(ballot)) != len(ballot):
        raise ValueError("Ballot ranks the same player more than once.")

    if voter_id in ballot:
        raise ValueError("Players cannot vote for themselves.")

    for player_id in ballot:
        if player_id not in eligible_player_ids:
            raise ValueError(f"Player {player_id} is not in this game.")

    return ballot
