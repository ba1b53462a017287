"""
Execution limits value object unit tests
"""
import pytest

from sandbox_gateway.domain.value_objects import (
    ExecutionLimits,
    MAX_MEMORY_LIMIT_KB,
    MAX_TIME_LIMIT_SECONDS,
)


class TestExecutionLimits:
    """Limit normalization tests"""

    def test_default(self):
        limits = ExecutionLimits()

        assert limits.time_limit_seconds == 3
        assert limits.memory_limit_kb == 128000

    @pytest.mark.parametrize("value", [0, -1, -0.5, 3.01, 4, 1000, float("nan"), float("inf")])
    def test_time_out_of_range_becomes_ceiling(self, value):
        assert ExecutionLimits.normalize(value, 1000).time_limit_seconds == MAX_TIME_LIMIT_SECONDS

    @pytest.mark.parametrize("value", [0.001, 0.5, 1, 2.5, 3])
    def test_time_in_range_is_identity(self, value):
        assert ExecutionLimits.normalize(value, 1000).time_limit_seconds == value

    @pytest.mark.parametrize("value", [0, -1, 128001, 10**9, float("nan"), float("-inf")])
    def test_memory_out_of_range_becomes_ceiling(self, value):
        assert ExecutionLimits.normalize(1, value).memory_limit_kb == MAX_MEMORY_LIMIT_KB

    @pytest.mark.parametrize("value", [1, 64000, 128000])
    def test_memory_in_range_is_identity(self, value):
        assert ExecutionLimits.normalize(1, value).memory_limit_kb == value

    def test_backend_units(self):
        """Run timeout in ms, memory in bytes"""
        limits = ExecutionLimits.normalize(2.5, 64000)

        assert limits.run_timeout_ms == 2500
        assert limits.memory_limit_bytes == 64000 * 1024

    @pytest.mark.parametrize("seconds, expected_ms", [
        (0.0004, 1),
        (0.0015, 2),
        (1.1, 1100),
        (1.9999, 2000),
        (3, 3000),
    ])
    def test_run_timeout_rounds_up(self, seconds, expected_ms):
        assert ExecutionLimits.normalize(seconds, 1000).run_timeout_ms == expected_ms

    def test_constructor_rejects_unnormalized_values(self):
        with pytest.raises(ValueError, match="time_limit_seconds"):
            ExecutionLimits(time_limit_seconds=5)
        with pytest.raises(ValueError, match="memory_limit_kb"):
            ExecutionLimits(memory_limit_kb=0)

    def test_frozen(self):
        limits = ExecutionLimits()

        with pytest.raises(Exception):
            limits.time_limit_seconds = 1
