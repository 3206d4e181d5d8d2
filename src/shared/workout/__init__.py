"""Live workout metric updates."""

from .pipeline import (
    SECONDS_PER_MINUTE,
    MetricUpdatePipeline,
    WorkoutMetrics,
    derive_cadence,
    make_workout_metrics,
)

__all__ = [
    "MetricUpdatePipeline",
    "WorkoutMetrics",
    "derive_cadence",
    "make_workout_metrics",
    "SECONDS_PER_MINUTE",
]
