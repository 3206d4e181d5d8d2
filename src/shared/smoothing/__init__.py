"""Smoothing algorithms for live pace streams."""

from .algorithm_type import SmoothingAlgorithmType, SmoothingMethod
from .base import InvalidConfigurationError, SmoothingAlgorithm
from .exponential_moving_average import ExponentialMovingAverage
from .simple_moving_average import SimpleMovingAverage

__all__ = [
    "SmoothingAlgorithm",
    "SmoothingAlgorithmType",
    "SmoothingMethod",
    "SimpleMovingAverage",
    "ExponentialMovingAverage",
    "InvalidConfigurationError",
]
