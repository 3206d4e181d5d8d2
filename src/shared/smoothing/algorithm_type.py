"""Configuration value selecting a smoothing strategy."""

from enum import Enum

from pydantic import BaseModel, Field

from .base import SmoothingAlgorithm
from .exponential_moving_average import DEFAULT_ALPHA, ExponentialMovingAverage
from .simple_moving_average import DEFAULT_BUFFER_SIZE, SimpleMovingAverage


class SmoothingMethod(str, Enum):
    """Available smoothing strategies."""

    SIMPLE_MOVING_AVERAGE = "sma"
    EXPONENTIAL_MOVING_AVERAGE = "ema"


class SmoothingAlgorithmType(BaseModel):
    """
    Selects the smoothing strategy and its parameters for a pace stream.

    Parameters are validated when the algorithm is built, so an invalid
    configuration surfaces as InvalidConfigurationError from make_algorithm().
    """

    method: SmoothingMethod = Field(
        default=SmoothingMethod.EXPONENTIAL_MOVING_AVERAGE,
        description="Smoothing strategy",
    )
    buffer_size: int = Field(
        default=DEFAULT_BUFFER_SIZE,
        description="Window size for the simple moving average",
    )
    alpha: float = Field(
        default=DEFAULT_ALPHA,
        description="Smoothing factor for the exponential moving average",
    )

    model_config = {"frozen": True}

    @classmethod
    def simple_moving_average(
        cls, buffer_size: int = DEFAULT_BUFFER_SIZE
    ) -> "SmoothingAlgorithmType":
        return cls(method=SmoothingMethod.SIMPLE_MOVING_AVERAGE, buffer_size=buffer_size)

    @classmethod
    def exponential_moving_average(cls, alpha: float = DEFAULT_ALPHA) -> "SmoothingAlgorithmType":
        return cls(method=SmoothingMethod.EXPONENTIAL_MOVING_AVERAGE, alpha=alpha)

    def make_algorithm(self) -> SmoothingAlgorithm:
        """Build a fresh algorithm instance with empty state."""
        if self.method == SmoothingMethod.SIMPLE_MOVING_AVERAGE:
            return SimpleMovingAverage(buffer_size=self.buffer_size)
        return ExponentialMovingAverage(alpha=self.alpha)
