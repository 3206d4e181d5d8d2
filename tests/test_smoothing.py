"""Tests for pace smoothing algorithms."""

import math

import pytest

from src.shared.smoothing import (
    ExponentialMovingAverage,
    InvalidConfigurationError,
    SimpleMovingAverage,
    SmoothingAlgorithm,
    SmoothingAlgorithmType,
    SmoothingMethod,
)


def smooth_all(algorithm: SmoothingAlgorithm, values: list[float]) -> list[float]:
    return [algorithm.smooth_pace(value) for value in values]


# Simple Moving Average


def test_simple_moving_average_default_buffer_size():
    """Test that the default window keeps the last 5 values."""
    sma = SimpleMovingAverage()

    assert smooth_all(sma, [10, 20, 30, 40, 50, 60]) == [10, 15, 20, 25, 30, 40]
    assert sma.buffer == (20, 30, 40, 50, 60)


def test_simple_moving_average_custom_buffer_size():
    """Test that a window of 3 evicts the oldest value."""
    sma = SimpleMovingAverage(buffer_size=3)

    assert smooth_all(sma, [10, 20, 30, 40]) == [10, 15, 20, 30]


def test_simple_moving_average_large_numbers():
    """Test averaging large pace values."""
    sma = SimpleMovingAverage()

    assert smooth_all(sma, [1000, 2000, 3000, 4000, 5000]) == [1000, 1500, 2000, 2500, 3000]


def test_simple_moving_average_negative_numbers():
    """Test that negative readings are averaged, not rejected."""
    sma = SimpleMovingAverage()

    assert smooth_all(sma, [-10, -20, -30, -40, -50]) == [-10, -15, -20, -25, -30]


def test_simple_moving_average_buffer_never_exceeds_capacity():
    """Test the window bound over a long stream."""
    sma = SimpleMovingAverage(buffer_size=4)

    for value in range(100):
        result = sma.smooth_pace(float(value))
        assert len(sma.buffer) <= sma.capacity
        assert result == pytest.approx(sum(sma.buffer) / len(sma.buffer))

    assert sma.buffer == (96.0, 97.0, 98.0, 99.0)


def test_simple_moving_average_buffer_size_one_tracks_input():
    """Test that a single-value window returns the latest reading."""
    sma = SimpleMovingAverage(buffer_size=1)

    assert smooth_all(sma, [3.2, 2.8, 3.5]) == [3.2, 2.8, 3.5]


@pytest.mark.parametrize("buffer_size", [0, -1, -5])
def test_simple_moving_average_rejects_non_positive_buffer_size(buffer_size):
    """Test that a non-positive window is an invalid configuration."""
    with pytest.raises(InvalidConfigurationError, match="buffer_size"):
        SimpleMovingAverage(buffer_size=buffer_size)


def test_invalid_configuration_is_value_error():
    """Test that configuration errors can be caught as ValueError."""
    with pytest.raises(ValueError):
        SimpleMovingAverage(buffer_size=0)


# Exponential Moving Average


def test_exponential_moving_average_default_alpha():
    """Test EMA with alpha 0.2."""
    ema = ExponentialMovingAverage()

    assert ema.smooth_pace(10) == 10
    assert ema.smooth_pace(20) == pytest.approx(12)
    assert ema.smooth_pace(30) == pytest.approx(15.6, abs=0.001)
    assert ema.smooth_pace(40) == pytest.approx(20.48, abs=0.001)
    assert ema.smooth_pace(50) == pytest.approx(26.384, abs=0.001)


def test_exponential_moving_average_custom_alpha():
    """Test EMA with alpha 0.5."""
    ema = ExponentialMovingAverage(alpha=0.5)

    assert smooth_all(ema, [10, 20, 30, 40, 50]) == [10, 15, 22.5, 31.25, 40.625]


def test_exponential_moving_average_large_numbers():
    """Test EMA with large pace values."""
    ema = ExponentialMovingAverage()

    results = smooth_all(ema, [1000, 2000, 3000, 4000, 5000])

    assert results == pytest.approx([1000, 1200, 1560, 2048, 2638.4], abs=0.001)


def test_exponential_moving_average_negative_numbers():
    """Test that EMA preserves sign."""
    ema = ExponentialMovingAverage()

    results = smooth_all(ema, [-10, -20, -30, -40, -50])

    assert results == pytest.approx([-10, -12, -15.6, -20.48, -26.384], abs=0.001)


def test_exponential_moving_average_follows_recurrence():
    """Test out[i] = alpha * s[i] + (1 - alpha) * out[i - 1] on an irregular stream."""
    alpha = 0.3
    ema = ExponentialMovingAverage(alpha=alpha)
    samples = [2.9, 3.4, 3.1, 0.0, 4.2, 3.8]

    previous = ema.smooth_pace(samples[0])
    assert previous == samples[0]
    for sample in samples[1:]:
        current = ema.smooth_pace(sample)
        assert current == pytest.approx(alpha * sample + (1 - alpha) * previous)
        previous = current


def test_exponential_moving_average_leading_zero_seeds_state():
    """Test that a first reading of 0.0 seeds the average like any other value."""
    ema = ExponentialMovingAverage(alpha=0.5)

    assert ema.smooth_pace(0.0) == 0.0
    assert ema.previous == 0.0
    # A zero sentinel would re-seed here and return 10
    assert ema.smooth_pace(10) == 5.0


def test_exponential_moving_average_alpha_one_tracks_input():
    """Test that alpha 1 returns the latest reading."""
    ema = ExponentialMovingAverage(alpha=1)

    assert smooth_all(ema, [3.0, 5.0, 4.0]) == [3.0, 5.0, 4.0]


def test_exponential_moving_average_previous_starts_unset():
    """Test that no state exists before the first sample."""
    assert ExponentialMovingAverage().previous is None


@pytest.mark.parametrize("alpha", [0, -0.1, 1.01, 2, math.nan])
def test_exponential_moving_average_rejects_alpha_out_of_range(alpha):
    """Test that alpha outside (0, 1] is an invalid configuration."""
    with pytest.raises(InvalidConfigurationError, match="alpha"):
        ExponentialMovingAverage(alpha=alpha)


# Algorithm type


def test_algorithm_type_defaults_to_ema():
    """Test the default smoothing configuration."""
    algorithm = SmoothingAlgorithmType().make_algorithm()

    assert isinstance(algorithm, ExponentialMovingAverage)
    assert algorithm.alpha == 0.2


def test_algorithm_type_simple_moving_average():
    """Test building an SMA from its configuration."""
    smoothing_type = SmoothingAlgorithmType.simple_moving_average(buffer_size=3)
    algorithm = smoothing_type.make_algorithm()

    assert smoothing_type.method == SmoothingMethod.SIMPLE_MOVING_AVERAGE
    assert isinstance(algorithm, SimpleMovingAverage)
    assert algorithm.capacity == 3


def test_algorithm_type_exponential_moving_average():
    """Test building an EMA from its configuration."""
    algorithm = SmoothingAlgorithmType.exponential_moving_average(alpha=0.5).make_algorithm()

    assert isinstance(algorithm, ExponentialMovingAverage)
    assert algorithm.alpha == 0.5


def test_algorithm_type_builds_independent_instances():
    """Test that each call returns a fresh algorithm with empty state."""
    smoothing_type = SmoothingAlgorithmType.simple_moving_average(buffer_size=2)
    first = smoothing_type.make_algorithm()
    first.smooth_pace(100)

    second = smoothing_type.make_algorithm()

    assert second is not first
    assert second.smooth_pace(10) == 10


def test_algorithm_type_from_method_string():
    """Test that the method can be given by its short name."""
    smoothing_type = SmoothingAlgorithmType(method="sma", buffer_size=4)

    assert smoothing_type.method == SmoothingMethod.SIMPLE_MOVING_AVERAGE


def test_algorithm_type_invalid_parameters_fail_on_build():
    """Test that invalid parameters surface when the algorithm is built."""
    with pytest.raises(InvalidConfigurationError):
        SmoothingAlgorithmType.simple_moving_average(buffer_size=0).make_algorithm()
    with pytest.raises(InvalidConfigurationError):
        SmoothingAlgorithmType.exponential_moving_average(alpha=0).make_algorithm()


def test_smoothing_algorithm_is_abstract():
    """Test that the interface cannot be instantiated."""
    with pytest.raises(TypeError):
        SmoothingAlgorithm()  # type: ignore[abstract]
