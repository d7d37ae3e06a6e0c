"""Muscle vocabulary: names declared by the active exercise library, and the fixed hierarchy."""

from __future__ import annotations

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from app.api.v1.endpoints.exercises import load_exercises
from app.core.constants import MUSCLE_HIERARCHY
from app.db.session import get_db
from app.services.workout_log import collect_muscle_groups

router = APIRouter()


async def load_known_muscles(db: AsyncSession) -> list[str]:
    """Union of primary and secondary muscles across the current library."""
    return collect_muscle_groups(await load_exercises(db))


@router.get("", response_model=list[str])
async def list_muscle_groups(db: AsyncSession = Depends(get_db)):
    """Known muscle names (changes whenever the library changes)."""
    return await load_known_muscles(db)


@router.get("/hierarchy", response_model=dict[str, list[str] | None])
async def muscle_hierarchy():
    """Major group -> sub-muscles (null for standalone groups), in display order."""
    return {
        major: list(subs) if subs is not None else None
        for major, subs in MUSCLE_HIERARCHY.items()
    }
