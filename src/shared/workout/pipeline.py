"""Routes live workout samples into metrics, smoothing and cadence derivation."""

import logging
import math
from collections.abc import Callable, Iterable

from pydantic import BaseModel

from ..config import Settings
from ..models.enums import SampleKind, WorkoutActivityType
from ..models.formatters import (
    ACTIVE_ENERGY_FORMATTER,
    CADENCE_FORMATTER,
    DEFAULT_LOCALE,
    DISTANCE_FORMATTER,
    HEART_RATE_FORMATTER,
    SPEED_FORMATTER,
)
from ..models.metric import (
    ActiveEnergy,
    AveragePace,
    Cadence,
    CurrentPace,
    Distance,
    HeartRate,
    Metric,
)
from ..models.samples import QuantitySample, QuantityStatistics, samples_from_statistics
from ..models.units import CadenceUnit
from ..smoothing import SmoothingAlgorithm, SmoothingAlgorithmType

logger = logging.getLogger(__name__)

SECONDS_PER_MINUTE = 60


def derive_cadence(stride_length: float, current_pace: float) -> float:
    """
    Derive cadence from stride length and the current (smoothed) pace.

    Args:
        stride_length: Stride or step length in meters
        current_pace: Current pace in meters per second

    Returns:
        Strides per minute, or 0.0 when stride length is zero or the
        result is not a finite number
    """
    if stride_length == 0:
        return 0.0
    cadence = (current_pace / stride_length) * SECONDS_PER_MINUTE
    if not math.isfinite(cadence):
        return 0.0
    return cadence


class WorkoutMetrics(BaseModel):
    """The set of metrics tracked during one workout session."""

    active_energy: Metric
    heart_rate: Metric
    average_heart_rate: Metric
    distance: Metric
    current_pace: Metric
    average_pace: Metric
    cadence: Metric

    def all(self) -> list[Metric]:
        """All tracked metrics in display order."""
        return [
            self.active_energy,
            self.heart_rate,
            self.average_heart_rate,
            self.distance,
            self.current_pace,
            self.average_pace,
            self.cadence,
        ]


def make_workout_metrics(
    activity_type: WorkoutActivityType = WorkoutActivityType.RUNNING,
    locale: str = DEFAULT_LOCALE,
) -> WorkoutMetrics:
    """
    Create the metrics for a new session, all starting at zero.

    Cycling cadence is shown in revolutions per minute, walking and
    running cadence in steps per minute.
    """
    energy_formatter = ACTIVE_ENERGY_FORMATTER
    heart_rate_formatter = HEART_RATE_FORMATTER
    distance_formatter = DISTANCE_FORMATTER
    speed_formatter = SPEED_FORMATTER
    cadence_formatter = CADENCE_FORMATTER
    if locale != DEFAULT_LOCALE:
        energy_formatter = energy_formatter.localized(locale)
        heart_rate_formatter = heart_rate_formatter.localized(locale)
        distance_formatter = distance_formatter.localized(locale)
        speed_formatter = speed_formatter.localized(locale)
        cadence_formatter = cadence_formatter.localized(locale)

    cadence_unit = (
        CadenceUnit.RPM if activity_type == WorkoutActivityType.CYCLING else CadenceUnit.SPM
    )

    return WorkoutMetrics(
        active_energy=Metric(
            kind=ActiveEnergy(formatter=energy_formatter), label="Active Energy"
        ),
        heart_rate=Metric(kind=HeartRate(formatter=heart_rate_formatter), label="Heart Rate"),
        average_heart_rate=Metric(
            kind=HeartRate(formatter=heart_rate_formatter), label="Avg. Heart Rate"
        ),
        distance=Metric(kind=Distance(formatter=distance_formatter), label="Distance"),
        current_pace=Metric(kind=CurrentPace(formatter=speed_formatter), label="Pace"),
        average_pace=Metric(kind=AveragePace(formatter=speed_formatter), label="Avg. Pace"),
        cadence=Metric(
            kind=Cadence(unit=cadence_unit, formatter=cadence_formatter), label="Cadence"
        ),
    )


class MetricUpdatePipeline:
    """
    Applies raw samples from a live workout data source to the session metrics.

    Each sample kind is either assigned directly, passed through the
    smoothing algorithm (speed), or used to derive cadence (stride length).

    Cadence derivation reads the current smoothed pace, so when speed and
    stride length readings belong to the same instant the speed reading
    must be applied first. handle_tick() enforces that ordering; callers
    using handle_sample() directly are responsible for it.

    Not thread-safe: samples must be delivered one at a time, in arrival order.
    """

    def __init__(
        self,
        smoothing: SmoothingAlgorithmType | None = None,
        activity_type: WorkoutActivityType = WorkoutActivityType.RUNNING,
        locale: str = DEFAULT_LOCALE,
    ) -> None:
        """
        Initialize the pipeline.

        Args:
            smoothing: Smoothing strategy for the current pace stream
                (exponential moving average by default)
            activity_type: Workout type, selects the cadence unit
            locale: Locale identifier for number separators

        Raises:
            InvalidConfigurationError: If the smoothing parameters are invalid
        """
        self.smoothing_type = smoothing or SmoothingAlgorithmType()
        self.activity_type = activity_type
        self.locale = locale
        self._smoothing = self.smoothing_type.make_algorithm()
        self.metrics = make_workout_metrics(activity_type, locale)

        self._handlers: dict[SampleKind, Callable[[float], Metric]] = {
            SampleKind.HEART_RATE: self._assign(self.metrics.heart_rate),
            SampleKind.AVERAGE_HEART_RATE: self._assign(self.metrics.average_heart_rate),
            SampleKind.ACTIVE_ENERGY: self._assign(self.metrics.active_energy),
            SampleKind.DISTANCE: self._assign(self.metrics.distance),
            SampleKind.SPEED: self._update_current_pace,
            SampleKind.AVERAGE_SPEED: self._assign(self.metrics.average_pace),
            SampleKind.STRIDE_LENGTH: self._update_cadence_from_stride,
            SampleKind.CADENCE: self._assign(self.metrics.cadence),
        }

        logger.info(
            f"Created metric pipeline for {activity_type.value} "
            f"with {self.smoothing_type.method.value} smoothing"
        )

    @classmethod
    def from_settings(cls, settings: Settings) -> "MetricUpdatePipeline":
        """Build a pipeline from application settings."""
        return cls(
            smoothing=settings.smoothing_type(),
            activity_type=settings.activity_type,
            locale=settings.locale,
        )

    @property
    def smoothing_algorithm(self) -> SmoothingAlgorithm:
        """Algorithm currently bound to the pace stream."""
        return self._smoothing

    @staticmethod
    def _assign(metric: Metric) -> Callable[[float], Metric]:
        def assign(value: float) -> Metric:
            metric.set(value)
            return metric

        return assign

    def _update_current_pace(self, value: float) -> Metric:
        self.metrics.current_pace.set(self._smoothing.smooth_pace(value))
        return self.metrics.current_pace

    def _update_cadence_from_stride(self, value: float) -> Metric:
        cadence = derive_cadence(
            stride_length=value, current_pace=self.metrics.current_pace.value
        )
        self.metrics.cadence.set(cadence)
        return self.metrics.cadence

    def handle_sample(self, sample: QuantitySample) -> Metric:
        """
        Apply one raw sample.

        Args:
            sample: Reading already converted to base units

        Returns:
            The metric updated by the sample
        """
        metric = self._handlers[sample.kind](sample.value)
        logger.debug(f"Applied {sample.kind.value}={sample.value} -> {metric.formatted_value}")
        return metric

    def handle_tick(self, samples: Iterable[QuantitySample]) -> list[Metric]:
        """
        Apply samples that belong to the same instant.

        Stride length samples are applied after all other samples so that
        cadence is derived from the pace of this tick. Relative order of
        the other samples is preserved.

        Returns:
            Updated metrics, in the order they were applied
        """
        ordered = sorted(samples, key=lambda sample: sample.kind == SampleKind.STRIDE_LENGTH)
        return [self.handle_sample(sample) for sample in ordered]

    def update_for_statistics(self, statistics: QuantityStatistics) -> list[Metric]:
        """Apply aggregated statistics for one quantity type."""
        return self.handle_tick(samples_from_statistics(statistics))

    def reset(self) -> None:
        """Zero every metric and start a fresh smoothing window."""
        for metric in self.metrics.all():
            metric.set(0.0)
        self._smoothing = self.smoothing_type.make_algorithm()
        logger.info("Reset workout metrics")

    def pages(self) -> list[list[Metric]]:
        """Metrics grouped the way a workout screen pages through them."""
        return [
            [self.metrics.active_energy, self.metrics.average_heart_rate, self.metrics.distance],
            [self.metrics.current_pace, self.metrics.average_pace, self.metrics.cadence],
        ]

    def snapshot(self) -> dict[str, str]:
        """Formatted value of every metric, keyed by metric name."""
        return {
            name: metric.formatted_value
            for name, metric in self.metrics
            if isinstance(metric, Metric)
        }
