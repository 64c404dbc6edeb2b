"""
Hear Me Out - Persistence Errors
"""

from postgrest.exceptions import APIError

# Postgres unique_violation
UNIQUE_VIOLATION = "23505"


class PersistenceError(Exception):
    """A write reached Supabase but did not produce the expected row."""


class PickConflictError(PersistenceError):
    """The pick number or entry was already claimed by a concurrent pick."""


class VoteConflictError(PersistenceError):
    """The voter already holds this rank in the game."""


def is_unique_violation(error: APIError) -> bool:
    return getattr(error, "code", None) == UNIQUE_VIOLATION


def first_row(rows: list[dict] | None, action: str) -> dict:
    """Return the single row a write returned, or raise PersistenceError."""
    if not rows:
        raise PersistenceError(f"{action} returned no rows")
    return rows[0]
