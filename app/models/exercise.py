"""Exercise model - the active exercise library with primary/secondary muscle targets."""

from __future__ import annotations

from sqlalchemy import JSON, Boolean, String
from sqlalchemy.dialects.postgresql import JSONB
from sqlalchemy.orm import Mapped, mapped_column

from app.db.base import Base


class Exercise(Base):
    """Exercise definition. Muscle names are free-form strings; the library defines the vocabulary."""

    __tablename__ = "exercises"

    id: Mapped[str] = mapped_column(String(64), primary_key=True)
    name: Mapped[str] = mapped_column(String(255), nullable=False, index=True)
    description: Mapped[str] = mapped_column(String(1000), default="", nullable=False)
    video_url: Mapped[str] = mapped_column(String(500), default="", nullable=False)
    primary_muscle: Mapped[str] = mapped_column(String(100), nullable=False, index=True)
    # e.g. ["Triceps", "Shoulders"]
    secondary_muscles: Mapped[list[str]] = mapped_column(
        JSON().with_variant(JSONB, "postgresql"), default=list, nullable=False
    )
    equipment: Mapped[str] = mapped_column(String(100), default="", nullable=False)
    type: Mapped[str] = mapped_column(String(50), default="", nullable=False)
    is_user_added: Mapped[bool] = mapped_column(Boolean, default=False, nullable=False)
