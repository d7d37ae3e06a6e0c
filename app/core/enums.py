"""Shared enums for models and API."""

from enum import Enum


class SetStatus(str, Enum):
    """Lifecycle of a set inside an active session."""

    PENDING = "pending"  # Planned, not performed yet
    LOGGED = "logged"  # Performed and recorded


class RecoveryState(str, Enum):
    """Readiness band derived from a recovery percentage."""

    FRESH = "fresh"
    RECOVERING = "recovering"
    FATIGUED = "fatigued"
