"""Smoothing algorithm interface for live pace streams."""

from abc import ABC, abstractmethod


class InvalidConfigurationError(ValueError):
    """Raised when a smoothing algorithm is constructed with invalid parameters."""


class SmoothingAlgorithm(ABC):
    """
    Interface for smoothing algorithms used on live pace readings.

    Implementations keep internal state across calls, so one instance is
    bound to exactly one stream and must be fed samples in arrival order.
    """

    @abstractmethod
    def smooth_pace(self, new_pace: float) -> float:
        """
        Incorporate a raw pace reading and return the smoothed pace.

        Args:
            new_pace: Latest raw pace value

        Returns:
            Smoothed pace value after applying the algorithm
        """
        raise NotImplementedError
