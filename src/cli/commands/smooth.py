"""Smooth command for pace CLI."""

import json

import typer

from src.cli import display
from src.shared.config import get_settings
from src.shared.smoothing import (
    InvalidConfigurationError,
    SmoothingAlgorithmType,
    SmoothingMethod,
)


def smooth(
    values: list[float] = typer.Argument(..., help="Raw pace readings in arrival order"),
    method: SmoothingMethod | None = typer.Option(
        None, "--method", "-m", help="Smoothing strategy (default from settings)"
    ),
    buffer_size: int | None = typer.Option(
        None, "--buffer-size", "-b", help="Window size for sma"
    ),
    alpha: float | None = typer.Option(None, "--alpha", "-a", help="Smoothing factor for ema"),
    json_output: bool = typer.Option(False, "--json", "-j", help="Output raw JSON"),
) -> None:
    """Smooth a sequence of raw pace readings."""
    settings = get_settings()
    smoothing_type = SmoothingAlgorithmType(
        method=method or settings.smoothing_method,
        buffer_size=buffer_size if buffer_size is not None else settings.sma_buffer_size,
        alpha=alpha if alpha is not None else settings.ema_alpha,
    )

    try:
        algorithm = smoothing_type.make_algorithm()
    except InvalidConfigurationError as e:
        display.display_error(str(e))
        raise typer.Exit(1) from e

    smoothed = [algorithm.smooth_pace(value) for value in values]

    if json_output:
        print(
            json.dumps(
                {"method": smoothing_type.method.value, "raw": values, "smoothed": smoothed},
                indent=2,
            )
        )
    else:
        display.display_smoothing(smoothing_type.method.value, values, smoothed)
