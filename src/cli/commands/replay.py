"""Replay command for pace CLI."""

import json
import logging
from pathlib import Path
from typing import Any

import typer
from pydantic import ValidationError

from src.cli import display
from src.shared.config import get_settings
from src.shared.models import QuantitySample, QuantityStatistics, WorkoutActivityType
from src.shared.smoothing import InvalidConfigurationError, SmoothingMethod
from src.shared.workout import MetricUpdatePipeline

logger = logging.getLogger(__name__)


def apply_entry(pipeline: MetricUpdatePipeline, entry: Any) -> None:
    """
    Apply one recorded entry to the pipeline.

    An entry is a sample ({"kind": ..., "value": ...}), a statistics object
    ({"quantityType": ..., "mostRecent": ..., ...}), or a list of samples
    taken at the same instant.
    """
    if isinstance(entry, list):
        pipeline.handle_tick(QuantitySample.model_validate(item) for item in entry)
    elif isinstance(entry, dict) and ("quantityType" in entry or "quantity_type" in entry):
        pipeline.update_for_statistics(QuantityStatistics.model_validate(entry))
    else:
        pipeline.handle_sample(QuantitySample.model_validate(entry))


def replay(
    path: Path = typer.Argument(
        ..., exists=True, dir_okay=False, readable=True, help="JSON array of recorded samples"
    ),
    activity: WorkoutActivityType | None = typer.Option(
        None, "--activity", help="Workout type (default from settings)"
    ),
    method: SmoothingMethod | None = typer.Option(
        None, "--method", "-m", help="Smoothing strategy (default from settings)"
    ),
    json_output: bool = typer.Option(False, "--json", "-j", help="Output raw JSON"),
) -> None:
    """Replay recorded samples and show the resulting workout metrics."""
    settings = get_settings()
    smoothing_type = settings.smoothing_type()
    if method is not None:
        smoothing_type = smoothing_type.model_copy(update={"method": method})

    try:
        pipeline = MetricUpdatePipeline(
            smoothing=smoothing_type,
            activity_type=activity or settings.activity_type,
            locale=settings.locale,
        )
    except InvalidConfigurationError as e:
        display.display_error(str(e))
        raise typer.Exit(1) from e

    try:
        with open(path) as f:
            entries = json.load(f)
    except json.JSONDecodeError as e:
        display.display_error(f"Invalid JSON in {path}: {e}")
        raise typer.Exit(1) from e

    if not isinstance(entries, list):
        display.display_error(f"Expected a JSON array of samples in {path}")
        raise typer.Exit(1)

    if not entries:
        display.display_warning(f"No samples in {path}")

    try:
        for entry in entries:
            apply_entry(pipeline, entry)
    except ValidationError as e:
        display.display_error(f"Invalid sample in {path}: {e}")
        raise typer.Exit(1) from e

    logger.info(f"Replayed {len(entries)} entries from {path}")

    if json_output:
        values = {name: metric.value for name, metric in pipeline.metrics}
        print(
            json.dumps(
                {"formatted": pipeline.snapshot(), "values": values},
                indent=2,
            )
        )
    else:
        title = pipeline.activity_type.display_name
        display.display_metric_pages(title, pipeline.pages())
