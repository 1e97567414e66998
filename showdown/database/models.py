"""
Place Value Showdown - Database Models

Pydantic models that mirror the Supabase table schemas.
"""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, Field


class HighScore(BaseModel):
    """Mirrors the `high_scores` table."""

    id: UUID | None = None
    player_name: str = Field(min_length=1, max_length=50)
    score: int = Field(ge=0)
    config_id: str
    user_id: str | None = None
    created_at: datetime | None = None

    model_config = {"from_attributes": True}
