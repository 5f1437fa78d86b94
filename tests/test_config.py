"""Tests for sweep configuration and timing helpers."""

import time

import numpy as np
import pytest

from latency_sweep import SweepConfig, time_execution
from latency_sweep.config import DEFAULT_SIZES, validate_sizes


def test_config_defaults():
    config = SweepConfig()

    assert config.sizes == DEFAULT_SIZES
    assert config.sizes is not DEFAULT_SIZES
    assert config.seed == 42
    assert config.isolate_timeout_s is None
    assert config.output_dir == "./results"
    assert config.write_chart is True


def test_config_accepts_any_sequence_of_sizes():
    assert SweepConfig(sizes=(1, 2, 3)).sizes == [1, 2, 3]


def test_config_validation():
    with pytest.raises(ValueError, match="sizes must not be empty"):
        SweepConfig(sizes=[])
    with pytest.raises(ValueError, match="sizes must be positive"):
        SweepConfig(sizes=[10, -5])
    with pytest.raises(ValueError, match="sizes must be integers"):
        SweepConfig(sizes=[1.5])
    with pytest.raises(ValueError, match="isolate_timeout_s must be positive"):
        SweepConfig(isolate_timeout_s=0)
    with pytest.raises(ValueError, match="chart dimensions must be positive"):
        SweepConfig(chart_width_in=0)


def test_time_execution_context_manager():
    with time_execution() as timing:
        time.sleep(0.01)

    assert "elapsed_ns" in timing
    assert timing["elapsed_ns"] >= 10_000_000
    assert timing["elapsed_ns"] < 1_000_000_000


def test_time_execution_records_on_error():
    with pytest.raises(KeyError):
        with time_execution() as timing:
            raise KeyError("x")

    assert timing["elapsed_ns"] >= 0


def test_config_accepts_numpy_integer_sizes():
    sizes = SweepConfig(sizes=list(np.array([10, 20]))).sizes

    assert sizes == [10, 20]
    assert all(type(size) is int for size in sizes)


def test_validate_sizes_rejects_bools_and_floats():
    with pytest.raises(ValueError, match="sizes must be integers"):
        validate_sizes([False])
    with pytest.raises(ValueError, match="sizes must be integers"):
        validate_sizes([np.float64(3.0)])
    assert validate_sizes(iter([3, np.int32(4)])) == [3, 4]
