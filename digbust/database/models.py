"""
Dig & Bust - Database Models

Pydantic models that mirror the Supabase table schemas.
"""

from datetime import datetime
from typing import Literal
from uuid import UUID

from pydantic import BaseModel, Field


class Score(BaseModel):
    """Mirrors the `scores` table."""

    id: UUID
    player_id: str
    display_name: str = Field(max_length=50)
    score: int = Field(ge=0)
    digs: int = Field(ge=0)
    outcome: Literal["bust", "jackpot"]
    created_at: datetime

    model_config = {"from_attributes": True}

    @property
    def is_jackpot(self) -> bool:
        return self.outcome == "jackpot"
