"""Pydantic record base with ULID id and created_at timestamp."""

from __future__ import annotations

from datetime import datetime, timezone

from pydantic import BaseModel, ConfigDict, Field
from ulid import ULID


def new_id() -> str:
    return str(ULID())


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


class Record(BaseModel):
    """Immutable in-memory record that provides a ULID id and created_at timestamp."""

    model_config = ConfigDict(frozen=True)

    id: str = Field(default_factory=new_id)
    created_at: datetime = Field(default_factory=utcnow)
