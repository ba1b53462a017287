"""
Execution backend port

Contract the gateway needs from the sandboxed execution service. The HTTP
adapter lives in infrastructure.executors.
"""
from abc import ABC, abstractmethod
from typing import List

from sandbox_gateway.domain.value_objects import BackendResult, ExecutionLimits, RuntimeSpec


class IExecutionBackend(ABC):
    """Execution backend interface"""

    @abstractmethod
    async def execute(
        self,
        runtime: RuntimeSpec,
        code: str,
        stdin: str,
        limits: ExecutionLimits,
    ) -> BackendResult:
        """
        Run one snippet on the backend.

        Raises:
            BackendUnreachableError: the request could not complete
            BackendError: the backend answered with a non-2xx status
        """
        pass

    @abstractmethod
    async def list_runtimes(self) -> List[RuntimeSpec]:
        """Return the backend's full runtime catalog"""
        pass
