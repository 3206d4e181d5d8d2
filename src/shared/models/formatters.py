"""Number and measurement formatters for displaying workout metrics."""

import math
from decimal import ROUND_HALF_EVEN, Context, Decimal

from pydantic import BaseModel, Field, model_validator

from .enums import UnitOptions
from .units import MeasurementUnit, convert, natural_unit

# (decimal separator, grouping separator) per locale identifier
LOCALE_SEPARATORS: dict[str, tuple[str, str]] = {
    "en_US": (".", ","),
    "en_GB": (".", ","),
    "en_AR": (",", "."),
    "es_AR": (",", "."),
    "de_DE": (",", "."),
    "fr_FR": (",", " "),
}
DEFAULT_LOCALE = "en_US"

# Wide enough to quantize any finite double
_DECIMAL_CONTEXT = Context(prec=800)


class NumberFormatter(BaseModel):
    """
    Formats plain numbers with a fixed set of separators and precision.

    Rounding is half-to-even. Trailing zeros beyond minimum_fraction_digits
    are dropped.
    """

    decimal_separator: str = Field(default=".", description="Separator before fraction digits")
    grouping_separator: str = Field(default=",", description="Thousands separator")
    uses_grouping: bool = Field(default=False, description="Insert thousands separators")
    minimum_fraction_digits: int = Field(default=0, ge=0)
    maximum_fraction_digits: int = Field(default=0, ge=0)

    model_config = {"frozen": True}

    @model_validator(mode="after")
    def check_fraction_digits(self) -> "NumberFormatter":
        """Ensure the fraction digit bounds are consistent."""
        if self.minimum_fraction_digits > self.maximum_fraction_digits:
            raise ValueError(
                f"minimum_fraction_digits ({self.minimum_fraction_digits}) must not exceed "
                f"maximum_fraction_digits ({self.maximum_fraction_digits})"
            )
        return self

    @classmethod
    def for_locale(cls, identifier: str, **options: object) -> "NumberFormatter":
        """
        Build a formatter using the separators of a locale.

        Args:
            identifier: Locale identifier such as "en_US" or "de_DE"
            **options: Remaining NumberFormatter fields

        Returns:
            NumberFormatter for the locale (en_US separators if unknown)
        """
        return cls(**options).localized(identifier)  # type: ignore[arg-type]

    def localized(self, identifier: str) -> "NumberFormatter":
        """Copy of this formatter using the separators of another locale."""
        decimal_separator, grouping_separator = LOCALE_SEPARATORS.get(
            identifier, LOCALE_SEPARATORS[DEFAULT_LOCALE]
        )
        return self.model_copy(
            update={
                "decimal_separator": decimal_separator,
                "grouping_separator": grouping_separator,
            }
        )

    def format(self, value: float) -> str:
        """Format a number as a display string."""
        if not math.isfinite(value):
            return str(value)

        quantum = Decimal(1).scaleb(-self.maximum_fraction_digits)
        rounded = Decimal(repr(float(value))).quantize(
            quantum, rounding=ROUND_HALF_EVEN, context=_DECIMAL_CONTEXT
        )
        sign = "-" if rounded.is_signed() and rounded != 0 else ""
        digits = f"{rounded.copy_abs():f}"
        integer_part, _, fraction_part = digits.partition(".")

        fraction_part = fraction_part.rstrip("0")
        if len(fraction_part) < self.minimum_fraction_digits:
            fraction_part = fraction_part.ljust(self.minimum_fraction_digits, "0")

        if self.uses_grouping:
            integer_part = self._group(integer_part)

        if fraction_part:
            return f"{sign}{integer_part}{self.decimal_separator}{fraction_part}"
        return f"{sign}{integer_part}"

    def _group(self, integer_part: str) -> str:
        groups = []
        while len(integer_part) > 3:
            groups.insert(0, integer_part[-3:])
            integer_part = integer_part[:-3]
        groups.insert(0, integer_part)
        return self.grouping_separator.join(groups)


class MeasurementFormatter(BaseModel):
    """Formats a value with its unit symbol, e.g. "5.55 km"."""

    number_formatter: NumberFormatter = Field(default_factory=NumberFormatter)
    unit_options: UnitOptions = Field(
        default=UnitOptions.PROVIDED_UNIT,
        description="Show the provided unit or scale to a natural one",
    )

    model_config = {"frozen": True}

    def localized(self, identifier: str) -> "MeasurementFormatter":
        """Copy of this formatter using the separators of another locale."""
        return self.model_copy(
            update={"number_formatter": self.number_formatter.localized(identifier)}
        )

    def format(self, value: float, unit: MeasurementUnit) -> str:
        """
        Format a measurement.

        Args:
            value: Value expressed in unit
            unit: Unit of the value

        Returns:
            Number followed by the displayed unit symbol
        """
        display_unit = unit
        if self.unit_options == UnitOptions.NATURAL_SCALE and math.isfinite(value):
            display_unit = natural_unit(value, unit)
            value = convert(value, unit, display_unit)
        return f"{self.number_formatter.format(value)} {display_unit.value}"


# Shared formatters, immutable once built
ACTIVE_ENERGY_FORMATTER = MeasurementFormatter(
    number_formatter=NumberFormatter(maximum_fraction_digits=0),
)
HEART_RATE_FORMATTER = NumberFormatter(maximum_fraction_digits=0)
DISTANCE_FORMATTER = MeasurementFormatter(
    number_formatter=NumberFormatter(maximum_fraction_digits=2),
    unit_options=UnitOptions.NATURAL_SCALE,
)
SPEED_FORMATTER = MeasurementFormatter(
    number_formatter=NumberFormatter(maximum_fraction_digits=1),
)
CADENCE_FORMATTER = NumberFormatter(maximum_fraction_digits=0)
