"""
Hear Me Out - Database Models

Pydantic models that mirror the Supabase table schemas.
"""

from datetime import datetime
from typing import Literal
from uuid import UUID

from pydantic import BaseModel, Field

from src.engine import base as engine

GameStatusValue = Literal["drafting", "hear_me_out", "voting", "complete"]


class Draft(BaseModel):
    """Mirrors the `drafts` table."""

    id: UUID
    subject: str
    created_at: datetime
    updated_at: datetime

    model_config = {"from_attributes": True}


class Entry(BaseModel):
    """Mirrors the `entries` table."""

    id: UUID
    draft_id: UUID
    name: str
    image_url: str | None = None
    created_at: datetime

    model_config = {"from_attributes": True}

    def to_engine(self) -> engine.Entry:
        return engine.Entry(id=str(self.id), name=self.name, image_url=self.image_url)


class DraftGame(BaseModel):
    """Mirrors the `draft_games` table."""

    id: UUID
    draft_id: UUID
    status: GameStatusValue = "drafting"
    created_at: datetime
    updated_at: datetime

    model_config = {"from_attributes": True}

    @property
    def game_status(self) -> engine.GameStatus:
        return engine.GameStatus(self.status)


class Player(BaseModel):
    """Mirrors the `players` table."""

    id: UUID
    draft_game_id: UUID
    name: str = Field(max_length=50)
    turn_order: int = Field(ge=0)
    created_at: datetime

    model_config = {"from_attributes": True}

    def to_engine(self) -> engine.Player:
        return engine.Player(id=str(self.id), name=self.name, turn_order=self.turn_order)


class Pick(BaseModel):
    """Mirrors the `picks` table."""

    id: UUID
    draft_game_id: UUID
    player_id: UUID
    entry_id: UUID
    pick_number: int = Field(ge=1)
    created_at: datetime

    model_config = {"from_attributes": True}

    def to_engine(self) -> engine.Pick:
        return engine.Pick(
            id=str(self.id),
            game_id=str(self.draft_game_id),
            player_id=str(self.player_id),
            entry_id=str(self.entry_id),
            pick_number=self.pick_number,
            created_at=self.created_at,
        )


class Vote(BaseModel):
    """Mirrors the `votes` table."""

    id: UUID
    draft_game_id: UUID
    voter_player_id: UUID
    rank: int
    voted_player_id: UUID
    created_at: datetime

    model_config = {"from_attributes": True}

    def to_engine(self) -> engine.Vote:
        return engine.Vote(
            id=str(self.id),
            game_id=str(self.draft_game_id),
            voter_player_id=str(self.voter_player_id),
            voted_player_id=str(self.voted_player_id),
            rank=self.rank,
        )
