"""Application constants."""

# Fixed muscle hierarchy: major group -> ordered sub-muscles (None = standalone).
# Declaration order is the display order of recovery output.
MUSCLE_HIERARCHY: dict[str, tuple[str, ...] | None] = {
    "Chest": None,
    "Back": None,
    "Shoulders": None,
    "Arms": ("Biceps", "Triceps", "Forearms"),
    "Legs": ("Quads", "Hamstrings", "Glutes", "Calves"),
}

# Recovery curve breakpoints (hours since last trained)
RECOVERY_EARLY_PHASE_HOURS = 24.0
RECOVERY_FULL_HOURS = 72.0
RECOVERY_AT_EARLY_PHASE_END = 25.0  # % recovered at the first breakpoint
FULLY_RECOVERED = 100

# Recovery bands for display (percent)
FATIGUED_BELOW = 25
RECOVERING_BELOW = 75

# Calorie estimate: total volume (lbs) / divisor
CALORIES_VOLUME_DIVISOR = 50

# Strength score: baseline + all-time volume (lbs) / divisor
STRENGTH_BASELINE = 100
STRENGTH_VOLUME_DIVISOR = 1000

# Progress chart windows, in months back from the reference time (None = all time)
PROGRESS_PERIOD_MONTHS = {"1M": 1, "3M": 3, "1Y": 12, "All": None}
