"""Simple Moving Average (SMA) smoothing."""

from collections import deque

from .base import InvalidConfigurationError, SmoothingAlgorithm

DEFAULT_BUFFER_SIZE = 5


class SimpleMovingAverage(SmoothingAlgorithm):
    """
    Arithmetic mean over a fixed-size trailing window.

    A larger buffer gives a smoother but slower-reacting average.
    """

    def __init__(self, buffer_size: int = DEFAULT_BUFFER_SIZE) -> None:
        """
        Initialize the moving average.

        Args:
            buffer_size: Number of recent values averaged (must be positive)

        Raises:
            InvalidConfigurationError: If buffer_size is not positive
        """
        if isinstance(buffer_size, bool) or not isinstance(buffer_size, int) or buffer_size <= 0:
            raise InvalidConfigurationError(
                f"buffer_size must be a positive integer, got {buffer_size!r}"
            )
        self._pace_buffer: deque[float] = deque(maxlen=buffer_size)

    @property
    def capacity(self) -> int:
        """Maximum number of values kept in the window."""
        return self._pace_buffer.maxlen or 0

    @property
    def buffer(self) -> tuple[float, ...]:
        """Values currently in the window, oldest first."""
        return tuple(self._pace_buffer)

    def smooth_pace(self, new_pace: float) -> float:
        # deque(maxlen=...) drops the oldest value once the window is full
        self._pace_buffer.append(new_pace)

        if not self._pace_buffer:
            return 0.0
        return sum(self._pace_buffer) / len(self._pace_buffer)
