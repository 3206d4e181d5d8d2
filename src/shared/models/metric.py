"""Workout metric value model."""

from collections.abc import Callable
from typing import Any, Literal
from uuid import UUID, uuid4

from pydantic import BaseModel, Field

from .formatters import (
    ACTIVE_ENERGY_FORMATTER,
    CADENCE_FORMATTER,
    DISTANCE_FORMATTER,
    HEART_RATE_FORMATTER,
    SPEED_FORMATTER,
    MeasurementFormatter,
    NumberFormatter,
)
from .units import CadenceUnit, EnergyUnit, HeartRateUnit, LengthUnit, SpeedUnit


class ActiveEnergy(BaseModel):
    """Cumulative active energy burned."""

    name: Literal["active_energy"] = "active_energy"
    unit: EnergyUnit = EnergyUnit.KILOCALORIES
    formatter: MeasurementFormatter = ACTIVE_ENERGY_FORMATTER

    model_config = {"frozen": True}


class HeartRate(BaseModel):
    """Heart rate, instantaneous or averaged."""

    name: Literal["heart_rate"] = "heart_rate"
    unit: HeartRateUnit = HeartRateUnit.BPM
    formatter: NumberFormatter = HEART_RATE_FORMATTER

    model_config = {"frozen": True}


class Distance(BaseModel):
    """Cumulative distance covered."""

    name: Literal["distance"] = "distance"
    unit: LengthUnit = LengthUnit.METERS
    formatter: MeasurementFormatter = DISTANCE_FORMATTER

    model_config = {"frozen": True}


class CurrentPace(BaseModel):
    """Smoothed instantaneous pace."""

    name: Literal["current_pace"] = "current_pace"
    unit: SpeedUnit = SpeedUnit.METERS_PER_SECOND
    formatter: MeasurementFormatter = SPEED_FORMATTER

    model_config = {"frozen": True}


class AveragePace(BaseModel):
    """Session average pace, as supplied by the data source."""

    name: Literal["average_pace"] = "average_pace"
    unit: SpeedUnit = SpeedUnit.METERS_PER_SECOND
    formatter: MeasurementFormatter = SPEED_FORMATTER

    model_config = {"frozen": True}


class Cadence(BaseModel):
    """Step or pedal rate."""

    name: Literal["cadence"] = "cadence"
    unit: CadenceUnit = CadenceUnit.SPM
    formatter: NumberFormatter = CADENCE_FORMATTER

    model_config = {"frozen": True}


MetricKind = ActiveEnergy | HeartRate | Distance | CurrentPace | AveragePace | Cadence


def _format_measurement(kind: Any, value: float) -> str:
    return kind.formatter.format(value, kind.unit)


def _format_rate(kind: Any, value: float) -> str:
    # Rates are rendered without a space before the symbol, e.g. "152bpm"
    return kind.formatter.format(value) + kind.unit.value


_FORMAT_RULES: dict[type[BaseModel], Callable[[Any, float], str]] = {
    ActiveEnergy: _format_measurement,
    HeartRate: _format_rate,
    Distance: _format_measurement,
    CurrentPace: _format_measurement,
    AveragePace: _format_measurement,
    Cadence: _format_rate,
}


class Metric(BaseModel):
    """
    A tracked workout quantity bound to its kind, unit and formatting rule.

    The kind is fixed for the lifetime of the metric; only the value changes.
    """

    id: UUID = Field(default_factory=uuid4, frozen=True)
    kind: MetricKind = Field(
        discriminator="name",
        frozen=True,
        description="Semantic kind carrying the unit and formatter",
    )
    value: float = Field(default=0.0, description="Current value in the kind's unit")
    label: str | None = Field(
        default=None,
        frozen=True,
        description="Caption shown above the value",
    )

    def set(self, new_value: float) -> None:
        """Replace the current value. No range checks are applied."""
        self.value = float(new_value)

    @property
    def formatted_value(self) -> str:
        """Display string for the current value."""
        return _FORMAT_RULES[type(self.kind)](self.kind, self.value)
