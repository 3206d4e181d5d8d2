"""Data models for live workout metrics."""

from .enums import QuantityType, SampleKind, UnitOptions, WorkoutActivityType
from .formatters import (
    ACTIVE_ENERGY_FORMATTER,
    CADENCE_FORMATTER,
    DISTANCE_FORMATTER,
    HEART_RATE_FORMATTER,
    SPEED_FORMATTER,
    MeasurementFormatter,
    NumberFormatter,
)
from .metric import (
    ActiveEnergy,
    AveragePace,
    Cadence,
    CurrentPace,
    Distance,
    HeartRate,
    Metric,
    MetricKind,
)
from .samples import QuantitySample, QuantityStatistics, samples_from_statistics
from .units import (
    CadenceUnit,
    EnergyUnit,
    HeartRateUnit,
    LengthUnit,
    SpeedUnit,
    convert,
    natural_unit,
)

__all__ = [
    # Metric
    "Metric",
    "MetricKind",
    "ActiveEnergy",
    "HeartRate",
    "Distance",
    "CurrentPace",
    "AveragePace",
    "Cadence",
    # Samples
    "QuantitySample",
    "QuantityStatistics",
    "samples_from_statistics",
    # Enums
    "QuantityType",
    "SampleKind",
    "UnitOptions",
    "WorkoutActivityType",
    # Formatters
    "NumberFormatter",
    "MeasurementFormatter",
    "ACTIVE_ENERGY_FORMATTER",
    "HEART_RATE_FORMATTER",
    "DISTANCE_FORMATTER",
    "SPEED_FORMATTER",
    "CADENCE_FORMATTER",
    # Units
    "EnergyUnit",
    "LengthUnit",
    "SpeedUnit",
    "HeartRateUnit",
    "CadenceUnit",
    "convert",
    "natural_unit",
]
