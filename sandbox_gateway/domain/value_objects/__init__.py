"""
Value objects
"""
from sandbox_gateway.domain.value_objects.runtime_spec import RuntimeSpec
from sandbox_gateway.domain.value_objects.execution_limits import (
    ExecutionLimits,
    MAX_TIME_LIMIT_SECONDS,
    MAX_MEMORY_LIMIT_KB,
    COMPILE_TIMEOUT_MS,
)
from sandbox_gateway.domain.value_objects.backend_result import StageResult, BackendResult
from sandbox_gateway.domain.value_objects.outcome import (
    Outcome,
    OutcomeKind,
    PROCESS_KILLED_OUTPUT,
)

__all__ = [
    "RuntimeSpec",
    "ExecutionLimits",
    "MAX_TIME_LIMIT_SECONDS",
    "MAX_MEMORY_LIMIT_KB",
    "COMPILE_TIMEOUT_MS",
    "StageResult",
    "BackendResult",
    "Outcome",
    "OutcomeKind",
    "PROCESS_KILLED_OUTPUT",
]
