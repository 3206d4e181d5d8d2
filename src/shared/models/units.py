"""Unit definitions and display conversions for workout metrics."""

from enum import Enum


class EnergyUnit(str, Enum):
    """Energy units. Values are display symbols."""

    KILOCALORIES = "kcal"
    KILOJOULES = "kJ"


class LengthUnit(str, Enum):
    """Length units. Values are display symbols."""

    METERS = "m"
    KILOMETERS = "km"
    MILES = "mi"


class SpeedUnit(str, Enum):
    """Speed units. Values are display symbols."""

    METERS_PER_SECOND = "m/s"
    KILOMETERS_PER_HOUR = "km/h"
    MILES_PER_HOUR = "mph"


class HeartRateUnit(str, Enum):
    """Heart rate units."""

    BPM = "bpm"


class CadenceUnit(str, Enum):
    """Cadence units: pedal revolutions or steps per minute."""

    RPM = "rpm"
    SPM = "spm"


MeasurementUnit = EnergyUnit | LengthUnit | SpeedUnit

# Conversion constants
MILES_TO_KM = 1.609344
SECONDS_PER_HOUR = 3600

# How many of each unit make up one base unit (kcal, m, m/s)
_PER_BASE_UNIT: dict[MeasurementUnit, float] = {
    EnergyUnit.KILOCALORIES: 1.0,
    EnergyUnit.KILOJOULES: 4.184,
    LengthUnit.METERS: 1.0,
    LengthUnit.KILOMETERS: 1 / 1000,
    LengthUnit.MILES: 1 / (MILES_TO_KM * 1000),
    SpeedUnit.METERS_PER_SECOND: 1.0,
    SpeedUnit.KILOMETERS_PER_HOUR: SECONDS_PER_HOUR / 1000,
    SpeedUnit.MILES_PER_HOUR: SECONDS_PER_HOUR / (MILES_TO_KM * 1000),
}

# Meters from which natural scale switches distance display to kilometers
NATURAL_SCALE_KM_THRESHOLD = 1000.0


def convert(value: float, from_unit: MeasurementUnit, to_unit: MeasurementUnit) -> float:
    """
    Convert a value between two units of the same dimension.

    Args:
        value: Value expressed in from_unit
        from_unit: Unit the value is expressed in
        to_unit: Target unit

    Returns:
        Value expressed in to_unit

    Raises:
        ValueError: If the units measure different dimensions
    """
    if type(from_unit) is not type(to_unit):
        raise ValueError(f"Cannot convert {from_unit.value} to {to_unit.value}")
    if from_unit == to_unit:
        return value
    return value / _PER_BASE_UNIT[from_unit] * _PER_BASE_UNIT[to_unit]


def natural_unit(value: float, unit: MeasurementUnit) -> MeasurementUnit:
    """
    Pick a readable display unit for a value.

    Speeds display in km/h, energy in kcal, and distances in kilometers
    once they reach a kilometer (meters below that).

    Args:
        value: Value expressed in unit
        unit: Unit the value is expressed in

    Returns:
        Unit to display the value in
    """
    if isinstance(unit, SpeedUnit):
        return SpeedUnit.KILOMETERS_PER_HOUR
    if isinstance(unit, EnergyUnit):
        return EnergyUnit.KILOCALORIES
    meters = abs(convert(value, unit, LengthUnit.METERS))
    if meters >= NATURAL_SCALE_KM_THRESHOLD:
        return LengthUnit.KILOMETERS
    return LengthUnit.METERS
