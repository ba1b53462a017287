"""
Execution limits value object

Caller-supplied limits are clamped, never rejected: anything outside the
allowed range (including NaN) becomes the ceiling.
"""
import math
from dataclasses import dataclass
from typing import Self

MAX_TIME_LIMIT_SECONDS = 3
MAX_MEMORY_LIMIT_KB = 128000

# Piston compile timeout, not caller configurable
COMPILE_TIMEOUT_MS = 10000


def _clamp(value: float, ceiling: float) -> float:
    # written as a negated range check so NaN fails it
    if not 0 < value <= ceiling:
        return ceiling
    return value


@dataclass(frozen=True)
class ExecutionLimits:
    """Normalized run limits (immutable)"""
    time_limit_seconds: float = MAX_TIME_LIMIT_SECONDS
    memory_limit_kb: int = MAX_MEMORY_LIMIT_KB

    def __post_init__(self):
        if not 0 < self.time_limit_seconds <= MAX_TIME_LIMIT_SECONDS:
            raise ValueError(
                f"time_limit_seconds must be in (0, {MAX_TIME_LIMIT_SECONDS}]"
            )
        if not 0 < self.memory_limit_kb <= MAX_MEMORY_LIMIT_KB:
            raise ValueError(
                f"memory_limit_kb must be in (0, {MAX_MEMORY_LIMIT_KB}]"
            )

    @classmethod
    def normalize(
        cls,
        time_limit_seconds: float = MAX_TIME_LIMIT_SECONDS,
        memory_limit_kb: int = MAX_MEMORY_LIMIT_KB,
    ) -> Self:
        """Clamp raw limits into the allowed range"""
        return cls(
            time_limit_seconds=_clamp(time_limit_seconds, MAX_TIME_LIMIT_SECONDS),
            memory_limit_kb=_clamp(memory_limit_kb, MAX_MEMORY_LIMIT_KB),
        )

    @property
    def run_timeout_ms(self) -> int:
        """Rounded up to whole milliseconds, never 0"""
        # round first so float noise (1.1 * 1000 = 1100.0000000000002) is not rounded up
        return max(1, math.ceil(round(self.time_limit_seconds * 1000, 6)))

    @property
    def memory_limit_bytes(self) -> int:
        return int(self.memory_limit_kb * 1024)
