"""
Runtime resolver

Recovers from a backend that does not know the requested runtime version by
looking up the newest version of the same language in the backend catalog
and retrying once.
"""
from typing import Optional

from sandbox_gateway.domain.ports import IExecutionBackend
from sandbox_gateway.domain.value_objects import BackendResult, ExecutionLimits, RuntimeSpec
from sandbox_gateway.infrastructure.executors.errors import BackendError, ExecutorError
from sandbox_gateway.infrastructure.logging import get_logger
from sandbox_gateway.shared.errors.domain import (
    MalformedBackendResponseError,
    RuntimeResolutionFailedError,
)

logger = get_logger(__name__)

UNKNOWN_RUNTIME_MARKERS = ("unknown", "runtime")


def is_unknown_runtime_error(message: Optional[str]) -> bool:
    """
    Whether a backend error message means the runtime/version is unknown.

    Piston has no error code for this, only free text such as
    "python-3.99.0 runtime is unknown".
    """
    if not message:
        return False
    lowered = message.lower()
    return any(marker in lowered for marker in UNKNOWN_RUNTIME_MARKERS)


class RuntimeResolver:
    """
    Single bounded fallback around IExecutionBackend.execute

    At most two execute calls and one catalog call per invocation.
    """

    def __init__(self, backend: IExecutionBackend):
        self._backend = backend

    async def execute_with_fallback(
        self,
        runtime: RuntimeSpec,
        code: str,
        stdin: str,
        limits: ExecutionLimits,
    ) -> BackendResult:
        """
        Execute, falling back to the catalog's newest version once.

        Raises:
            BackendError: non runtime-related backend error, or the retry failed
            BackendUnreachableError: the backend could not be reached
            RuntimeResolutionFailedError: no usable replacement version
        """
        try:
            return await self._backend.execute(runtime, code, stdin, limits)
        except BackendError as e:
            if not is_unknown_runtime_error(e.message):
                raise
            original = e

        logger.warning(
            "Runtime rejected by backend, querying catalog",
            runtime=str(runtime),
            error=original.message,
        )

        candidate = await self._find_candidate_version(runtime, original)
        if candidate is None or candidate == runtime.version:
            logger.error(
                "No replacement runtime available",
                runtime=str(runtime),
                candidate=candidate,
            )
            raise RuntimeResolutionFailedError(
                original.message,
                {"language": runtime.language, "version": runtime.version},
            ) from original

        fallback = runtime.with_version(candidate)
        logger.info("Retrying with catalog runtime", runtime=str(fallback))
        return await self._backend.execute(fallback, code, stdin, limits)

    async def _find_candidate_version(
        self,
        runtime: RuntimeSpec,
        original: BackendError,
    ) -> Optional[str]:
        """First catalog version for the runtime's language, treated as newest"""
        try:
            catalog = await self._backend.list_runtimes()
        except (ExecutorError, MalformedBackendResponseError) as e:
            logger.error("Runtime catalog query failed", error=str(e))
            raise RuntimeResolutionFailedError(
                original.message,
                {"language": runtime.language, "catalog_error": str(e)},
            ) from original

        language = runtime.language.lower()
        for entry in catalog:
            if entry.language.lower() == language:
                return entry.version
        return None
