"""Muscle recovery estimation.

Recovery is a function of elapsed time since a muscle was last trained, and nothing
else (no volume or intensity term):

    hours_ago < 24        ->  (hours_ago / 24) * 25             0% .. 25%
    24 <= hours_ago < 72  ->  25 + ((hours_ago - 24) / 48) * 75  25% .. 100%
    hours_ago >= 72       ->  100

A muscle counts as trained by an exercise when it is the primary muscle or one of the
secondary muscles. Per-muscle percentages are then folded into the fixed
MUSCLE_HIERARCHY (standalone groups keep their own value, composite groups average
the sub-muscles that are known to the active exercise library).

Everything here is pure: callers pass ``now`` explicitly.
"""

from __future__ import annotations

import logging
import math
from collections.abc import Iterable, Mapping
from datetime import datetime, timezone

from app.core.constants import (
    FULLY_RECOVERED,
    MUSCLE_HIERARCHY,
    RECOVERY_AT_EARLY_PHASE_END,
    RECOVERY_EARLY_PHASE_HOURS,
    RECOVERY_FULL_HOURS,
)
from app.schemas.recovery import GroupedRecoveryStatus, MuscleRecoveryDetails
from app.schemas.workout import Workout

logger = logging.getLogger(__name__)


def round_half_up(value: float) -> int:
    """Round .5 away from zero for positives (62.5 -> 63), unlike Python's banker's round()."""
    return math.floor(value + 0.5)


def parse_history_key(key: str) -> datetime | None:
    """Parse an ISO timestamp key to an aware UTC datetime. None if unparseable."""
    if not isinstance(key, str) or not key.strip():
        return None
    text = key.strip()
    if text.endswith(("Z", "z")):
        text = text[:-1] + "+00:00"
    try:
        parsed = datetime.fromisoformat(text)
    except ValueError:
        return None
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed.astimezone(timezone.utc)


def sorted_history(history: Mapping[str, Workout]) -> list[tuple[datetime, str, Workout]]:
    """History entries with parseable keys, newest first. Unparseable keys are skipped."""
    entries: list[tuple[datetime, str, Workout]] = []
    for key, workout in history.items():
        worked_at = parse_history_key(key)
        if worked_at is None:
            logger.warning("Skipping workout history entry with unparseable timestamp %r", key)
            continue
        entries.append((worked_at, key, workout))
    entries.sort(key=lambda e: e[0], reverse=True)
    return entries


def last_worked_times(history: Mapping[str, Workout]) -> dict[str, datetime]:
    """
    Most recent time each muscle was trained (primary or secondary).

    Walks workouts newest first and keeps the first time seen per muscle, which is the
    per-muscle maximum without a separate max-reduction.
    """
    last_worked: dict[str, datetime] = {}
    for worked_at, _key, workout in sorted_history(history):
        for exercise in workout.exercises:
            for muscle in (exercise.primary_muscle, *exercise.secondary_muscles):
                if muscle and muscle not in last_worked:
                    last_worked[muscle] = worked_at
    return last_worked


def recovery_percentage(hours_ago: float) -> int:
    """Recovery % for a muscle last trained ``hours_ago`` hours ago (rounded half-up, 0-100)."""
    if hours_ago >= RECOVERY_FULL_HOURS:
        return FULLY_RECOVERED
    if hours_ago >= RECOVERY_EARLY_PHASE_HOURS:
        ramp = (hours_ago - RECOVERY_EARLY_PHASE_HOURS) / (RECOVERY_FULL_HOURS - RECOVERY_EARLY_PHASE_HOURS)
        percentage = RECOVERY_AT_EARLY_PHASE_END + ramp * (FULLY_RECOVERED - RECOVERY_AT_EARLY_PHASE_END)
    else:
        percentage = (hours_ago / RECOVERY_EARLY_PHASE_HOURS) * RECOVERY_AT_EARLY_PHASE_END
    # Future timestamps (clock skew) would go negative
    return min(max(round_half_up(percentage), 0), FULLY_RECOVERED)


def muscle_recovery(
    last_worked: Mapping[str, datetime],
    known_muscles: Iterable[str],
    now: datetime,
) -> dict[str, int]:
    """Per-muscle recovery % for every known muscle. Never-trained muscles are 100."""
    if now.tzinfo is None:
        now = now.replace(tzinfo=timezone.utc)
    individual: dict[str, int] = {}
    for muscle in known_muscles:
        worked_at = last_worked.get(muscle)
        if worked_at is None:
            individual[muscle] = FULLY_RECOVERED
            continue
        hours_ago = (now - worked_at).total_seconds() / 3600
        individual[muscle] = recovery_percentage(hours_ago)
    return individual


def group_recovery(individual: Mapping[str, int]) -> GroupedRecoveryStatus:
    """Fold per-muscle values into MUSCLE_HIERARCHY, in its declared order.

    Groups with no known constituent muscle are left out.
    """
    grouped: GroupedRecoveryStatus = {}
    for major, sub_muscles in MUSCLE_HIERARCHY.items():
        if sub_muscles is None:
            if major in individual:
                grouped[major] = MuscleRecoveryDetails(average=individual[major])
            continue

        present = {name: individual[name] for name in sub_muscles if name in individual}
        if present:
            grouped[major] = MuscleRecoveryDetails(
                average=round_half_up(sum(present.values()) / len(present)),
                sub_muscles=present,
            )
    return grouped


def calculate_recovery(
    history: Mapping[str, Workout],
    known_muscles: Iterable[str],
    now: datetime,
) -> GroupedRecoveryStatus:
    """
    Grouped recovery status for the known muscles at ``now``.

    history: timestamp key -> finished workout (order irrelevant).
    known_muscles: muscle names declared by the active exercise library.
    Muscles in history but not in known_muscles do not show up anywhere.
    """
    last_worked = last_worked_times(history)
    individual = muscle_recovery(last_worked, known_muscles, now)
    return group_recovery(individual)
