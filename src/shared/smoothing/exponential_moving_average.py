"""Exponential Moving Average (EMA) smoothing."""

from .base import InvalidConfigurationError, SmoothingAlgorithm

DEFAULT_ALPHA = 0.2


class ExponentialMovingAverage(SmoothingAlgorithm):
    """
    Recursively weighted average favoring recent readings.

    EMA = alpha * new_value + (1 - alpha) * previous_EMA
    """

    def __init__(self, alpha: float = DEFAULT_ALPHA) -> None:
        """
        Initialize the exponential moving average.

        Args:
            alpha: Smoothing factor in (0, 1]. Higher values react faster
                to recent changes, lower values smooth out short-term noise.

        Raises:
            InvalidConfigurationError: If alpha is outside (0, 1]
        """
        if not 0 < alpha <= 1:
            raise InvalidConfigurationError(f"alpha must be in (0, 1], got {alpha!r}")
        self.alpha = alpha
        self._previous: float | None = None

    @property
    def previous(self) -> float | None:
        """Last smoothed value, or None before the first sample."""
        return self._previous

    def smooth_pace(self, new_pace: float) -> float:
        if self._previous is None:
            # First sample seeds the average
            self._previous = new_pace
        else:
            self._previous = self.alpha * new_pace + (1 - self.alpha) * self._previous
        return self._previous
