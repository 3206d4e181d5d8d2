"""Raw samples and aggregated statistics delivered by a live data source."""

import logging
from datetime import datetime

from pydantic import BaseModel, Field

from .enums import QuantityType, SampleKind

logger = logging.getLogger(__name__)


class QuantitySample(BaseModel):
    """
    A single raw reading for one metric kind.

    Values are already in base units: kcal, meters, meters/second,
    beats/minute and revolutions or steps per minute.
    """

    kind: SampleKind = Field(description="Semantic kind of the reading")
    value: float = Field(description="Reading in base units")
    timestamp: datetime | None = Field(
        default=None,
        description="When the reading was taken",
    )

    model_config = {"frozen": True}


class QuantityStatistics(BaseModel):
    """Aggregated statistics for one quantity type during a live workout."""

    quantity_type: QuantityType = Field(
        description="Quantity the statistics describe",
        alias="quantityType",
    )
    most_recent: float | None = Field(
        default=None,
        description="Most recent reading",
        alias="mostRecent",
    )
    average: float | None = Field(default=None, description="Average over the session")
    sum: float | None = Field(default=None, description="Cumulative sum over the session")
    timestamp: datetime | None = Field(default=None, description="When the statistics were taken")

    model_config = {"populate_by_name": True, "frozen": True}


# Which statistic feeds which sample kind, per quantity type
_STATISTICS_ROUTES: dict[QuantityType, tuple[tuple[str, SampleKind], ...]] = {
    QuantityType.HEART_RATE: (
        ("most_recent", SampleKind.HEART_RATE),
        ("average", SampleKind.AVERAGE_HEART_RATE),
    ),
    QuantityType.ACTIVE_ENERGY_BURNED: (("sum", SampleKind.ACTIVE_ENERGY),),
    QuantityType.DISTANCE_WALKING_RUNNING: (("sum", SampleKind.DISTANCE),),
    QuantityType.DISTANCE_CYCLING: (("sum", SampleKind.DISTANCE),),
    QuantityType.WALKING_SPEED: (
        ("most_recent", SampleKind.SPEED),
        ("average", SampleKind.AVERAGE_SPEED),
    ),
    QuantityType.RUNNING_SPEED: (
        ("most_recent", SampleKind.SPEED),
        ("average", SampleKind.AVERAGE_SPEED),
    ),
    QuantityType.CYCLING_SPEED: (
        ("most_recent", SampleKind.SPEED),
        ("average", SampleKind.AVERAGE_SPEED),
    ),
    QuantityType.CYCLING_CADENCE: (("most_recent", SampleKind.CADENCE),),
    QuantityType.WALKING_STEP_LENGTH: (("most_recent", SampleKind.STRIDE_LENGTH),),
    QuantityType.RUNNING_STRIDE_LENGTH: (("most_recent", SampleKind.STRIDE_LENGTH),),
}


def samples_from_statistics(statistics: QuantityStatistics) -> list[QuantitySample]:
    """
    Split aggregated statistics into raw samples for the update pipeline.

    Statistics that are absent produce no sample.

    Args:
        statistics: Statistics for one quantity type

    Returns:
        Samples in the order they should be applied
    """
    routes = _STATISTICS_ROUTES.get(statistics.quantity_type)
    if routes is None:
        logger.debug(f"No sample routes for quantity type {statistics.quantity_type}")
        return []

    samples = []
    for statistic, kind in routes:
        value = getattr(statistics, statistic)
        if value is None:
            continue
        samples.append(QuantitySample(kind=kind, value=value, timestamp=statistics.timestamp))
    return samples
