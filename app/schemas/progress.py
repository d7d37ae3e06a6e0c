"""Progress chart schemas."""

from typing import Literal

from pydantic import BaseModel

ProgressPeriod = Literal["1M", "3M", "1Y", "All"]


class ProgressPoint(BaseModel):
    logged_at: str
    date: str  # chart label, e.g. "Mar 8"
    volume: float
    calories: int


class ProgressReport(BaseModel):
    period: ProgressPeriod
    points: list[ProgressPoint]
    # All-time, independent of the period
    strength_score: float
