"""Initial schema: exercise library and workout history.

Revision ID: 001
Revises:
Create Date: 2026-10-19

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects import postgresql


revision: str = "001"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None

JSON_TYPE = sa.JSON().with_variant(postgresql.JSONB(), "postgresql")


def upgrade() -> None:
    op.create_table(
        "exercises",
        sa.Column("id", sa.String(length=64), nullable=False),
        sa.Column("name", sa.String(length=255), nullable=False),
        sa.Column("description", sa.String(length=1000), nullable=False, server_default=""),
        sa.Column("video_url", sa.String(length=500), nullable=False, server_default=""),
        sa.Column("primary_muscle", sa.String(length=100), nullable=False),
        sa.Column("secondary_muscles", JSON_TYPE, nullable=False),
        sa.Column("equipment", sa.String(length=100), nullable=False, server_default=""),
        sa.Column("type", sa.String(length=50), nullable=False, server_default=""),
        sa.Column("is_user_added", sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.PrimaryKeyConstraint("id", name="pk_exercises"),
    )
    op.create_index("ix_exercises_name", "exercises", ["name"], unique=False)
    op.create_index("ix_exercises_primary_muscle", "exercises", ["primary_muscle"], unique=False)

    op.create_table(
        "workouts",
        sa.Column("id", sa.Uuid(), nullable=False),
        sa.Column("logged_at", sa.String(length=40), nullable=False),
        sa.Column("total_time", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("total_volume", sa.Float(), nullable=False, server_default="0"),
        sa.Column("calories", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("exercises", JSON_TYPE, nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=True),
        sa.PrimaryKeyConstraint("id", name="pk_workouts"),
        sa.UniqueConstraint("logged_at", name="uq_workouts_logged_at"),
    )


def downgrade() -> None:
    op.drop_table("workouts")
    op.drop_index("ix_exercises_primary_muscle", table_name="exercises")
    op.drop_index("ix_exercises_name", table_name="exercises")
    op.drop_table("exercises")
