"""
Run code command

Structural validation of a run request. Runs before any backend call.
"""
from dataclasses import dataclass
from numbers import Real
from typing import Any

from sandbox_gateway.domain.value_objects.execution_limits import (
    MAX_MEMORY_LIMIT_KB,
    MAX_TIME_LIMIT_SECONDS,
)
from sandbox_gateway.shared.errors.domain import InvalidInputError

REQUIRED_MESSAGE = "Code and language are required"


def _is_blank_or_not_str(value: Any) -> bool:
    return not isinstance(value, str) or value.strip() == ""


def _is_number(value: Any) -> bool:
    return isinstance(value, Real) and not isinstance(value, bool)


@dataclass(frozen=True)
class RunCodeCommand:
    """
    Run code command

    code is executed exactly as given; stripping is only used to reject blank
    input. Limits are clamped later, so any number is accepted here.
    """
    code: str
    language: str
    stdin: str = ""
    time_limit_seconds: float = MAX_TIME_LIMIT_SECONDS
    memory_limit_kb: int = MAX_MEMORY_LIMIT_KB

    def __post_init__(self):
        if _is_blank_or_not_str(self.code) or _is_blank_or_not_str(self.language):
            raise InvalidInputError(REQUIRED_MESSAGE)
        if not isinstance(self.stdin, str):
            raise InvalidInputError("stdin must be a string")
        if not _is_number(self.time_limit_seconds):
            raise InvalidInputError("timeLimit must be a number")
        if not _is_number(self.memory_limit_kb):
            raise InvalidInputError("memoryLimit must be a number")
