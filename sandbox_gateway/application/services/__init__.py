from sandbox_gateway.application.services.runtime_resolver import (
    RuntimeResolver,
    is_unknown_runtime_error,
)
from sandbox_gateway.application.services.code_execution_service import CodeExecutionService

__all__ = ["RuntimeResolver", "is_unknown_runtime_error", "CodeExecutionService"]
