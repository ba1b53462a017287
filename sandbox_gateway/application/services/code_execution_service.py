"""
Code execution application service

Orchestrates one run: registry lookup, limit normalization, backend call with
runtime fallback, classification.
"""
from typing import Mapping, Optional

from sandbox_gateway.application.commands.run_code import RunCodeCommand
from sandbox_gateway.application.services.runtime_resolver import RuntimeResolver
from sandbox_gateway.domain.ports import IExecutionBackend
from sandbox_gateway.domain.services import RuntimeRegistry, classify
from sandbox_gateway.domain.value_objects import ExecutionLimits, Outcome, RuntimeSpec
from sandbox_gateway.infrastructure.logging import get_logger

logger = get_logger(__name__)


class CodeExecutionService:
    """
    Code execution service

    Stateless apart from the injected, read-only registry; safe to share
    across concurrent requests.
    """

    def __init__(
        self,
        registry: RuntimeRegistry,
        backend: IExecutionBackend,
        resolver: Optional[RuntimeResolver] = None,
    ):
        self._registry = registry
        self._resolver = resolver or RuntimeResolver(backend)

    async def run_code(self, command: RunCodeCommand) -> Outcome:
        """
        Run code use case

        Flow:
        1. Resolve the language to its default runtime
        2. Clamp the limits
        3. Execute on the backend (one fallback retry on unknown runtime)
        4. Classify the backend result

        Raises:
            UnsupportedLanguageError: language not in the registry
            BackendUnreachableError / BackendError: backend failures
            RuntimeResolutionFailedError: fallback found no usable runtime
            MalformedBackendResponseError: result has neither compile nor run
        """
        runtime = self._registry.lookup(command.language)
        limits = ExecutionLimits.normalize(
            command.time_limit_seconds,
            command.memory_limit_kb,
        )

        logger.info(
            "Received code run request",
            language=runtime.language,
            version=runtime.version,
            code_length=len(command.code),
            time_limit_seconds=limits.time_limit_seconds,
            memory_limit_kb=limits.memory_limit_kb,
        )

        result = await self._resolver.execute_with_fallback(
            runtime,
            command.code,
            command.stdin,
            limits,
        )
        outcome = classify(result)

        logger.info(
            "Code run finished",
            language=runtime.language,
            outcome=outcome.kind.value,
        )
        return outcome

    def runtimes(self) -> Mapping[str, RuntimeSpec]:
        """Language id -> default runtime"""
        return self._registry.runtimes
