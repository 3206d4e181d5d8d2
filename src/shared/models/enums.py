"""Enumeration types for workout metric models."""

from enum import Enum


class WorkoutActivityType(str, Enum):
    """Type of workout being tracked."""

    RUNNING = "running"
    WALKING = "walking"
    CYCLING = "cycling"

    @property
    def display_name(self) -> str:
        """Short name shown in workout lists."""
        return {
            WorkoutActivityType.RUNNING: "Run",
            WorkoutActivityType.CYCLING: "Bike",
            WorkoutActivityType.WALKING: "Walk",
        }[self]


class SampleKind(str, Enum):
    """Semantic kind of a raw sample delivered to the update pipeline."""

    HEART_RATE = "heart_rate"
    AVERAGE_HEART_RATE = "average_heart_rate"
    ACTIVE_ENERGY = "active_energy"
    DISTANCE = "distance"
    SPEED = "speed"
    AVERAGE_SPEED = "average_speed"
    STRIDE_LENGTH = "stride_length"
    CADENCE = "cadence"


class QuantityType(str, Enum):
    """Quantity types reported by a live workout data source."""

    HEART_RATE = "heart_rate"
    ACTIVE_ENERGY_BURNED = "active_energy_burned"
    DISTANCE_WALKING_RUNNING = "distance_walking_running"
    DISTANCE_CYCLING = "distance_cycling"
    WALKING_SPEED = "walking_speed"
    RUNNING_SPEED = "running_speed"
    CYCLING_SPEED = "cycling_speed"
    CYCLING_CADENCE = "cycling_cadence"
    WALKING_STEP_LENGTH = "walking_step_length"
    RUNNING_STRIDE_LENGTH = "running_stride_length"


class UnitOptions(str, Enum):
    """How a measurement formatter picks the displayed unit."""

    PROVIDED_UNIT = "provided_unit"  # show the metric's own unit
    NATURAL_SCALE = "natural_scale"  # pick a readable unit for the magnitude
