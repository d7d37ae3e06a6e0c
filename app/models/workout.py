"""Workout history entry model."""

from __future__ import annotations

import uuid
from datetime import datetime, timezone

from sqlalchemy import JSON, DateTime, Float, Integer, String, Uuid
from sqlalchemy.dialects.postgresql import JSONB
from sqlalchemy.orm import Mapped, mapped_column

from app.db.base import Base


class Workout(Base):
    """A finished workout session.

    ``logged_at`` is the ISO timestamp key the session was finished at; it is the
    workout's identity in the history and is never rewritten.
    ``exercises`` is an immutable snapshot of the logged exercises (definition + logged sets),
    so later library edits do not change what the history says was trained.
    """

    __tablename__ = "workouts"

    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)
    logged_at: Mapped[str] = mapped_column(String(40), nullable=False, unique=True)
    total_time: Mapped[int] = mapped_column(Integer, default=0, nullable=False)  # seconds
    total_volume: Mapped[float] = mapped_column(Float, default=0.0, nullable=False)  # sum(weight * reps)
    calories: Mapped[int] = mapped_column(Integer, default=0, nullable=False)
    exercises: Mapped[list[dict]] = mapped_column(
        JSON().with_variant(JSONB, "postgresql"), default=list, nullable=False
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), default=lambda: datetime.now(timezone.utc)
    )
