"""
Execution backend client

HTTP adapter for the Piston sandboxed execution service.
"""
from sandbox_gateway.infrastructure.executors.client import PistonClient
from sandbox_gateway.infrastructure.executors.dto import (
    PistonExecuteRequest,
    PistonExecuteResponse,
    PistonRuntime,
    PistonStage,
)
from sandbox_gateway.infrastructure.executors.errors import (
    ExecutorError,
    BackendUnreachableError,
    BackendError,
)

__all__ = [
    "PistonClient",
    "PistonExecuteRequest",
    "PistonExecuteResponse",
    "PistonRuntime",
    "PistonStage",
    "ExecutorError",
    "BackendUnreachableError",
    "BackendError",
]
