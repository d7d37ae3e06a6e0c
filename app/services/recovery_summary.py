"""Readiness summary helpers for the recovery view: bands, fresh groups, last workout."""

from __future__ import annotations

import math
from collections.abc import Mapping
from datetime import datetime, timezone

from app.core.constants import FATIGUED_BELOW, FULLY_RECOVERED, RECOVERING_BELOW
from app.core.enums import RecoveryState
from app.schemas.recovery import GroupedRecoveryStatus
from app.schemas.workout import Workout
from app.services.recovery import sorted_history


def recovery_state(percentage: int) -> RecoveryState:
    if percentage < FATIGUED_BELOW:
        return RecoveryState.FATIGUED
    if percentage < RECOVERING_BELOW:
        return RecoveryState.RECOVERING
    return RecoveryState.FRESH


def count_fresh_groups(status: GroupedRecoveryStatus) -> int:
    """Groups whose average is fully recovered."""
    return sum(1 for details in status.values() if details.average == FULLY_RECOVERED)


def describe_last_workout(history: Mapping[str, Workout], now: datetime) -> str:
    """Human-readable age of the newest workout: '12 min ago', '5h ago', '3d ago' or 'N/A'."""
    entries = sorted_history(history)
    if not entries:
        return "N/A"
    if now.tzinfo is None:
        now = now.replace(tzinfo=timezone.utc)
    diff_hours = max((now - entries[0][0]).total_seconds() / 3600, 0.0)
    if diff_hours < 1:
        return f"{math.floor(diff_hours * 60)} min ago"
    if diff_hours < 24:
        return f"{math.floor(diff_hours)}h ago"
    return f"{math.floor(diff_hours / 24)}d ago"
