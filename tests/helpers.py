"""
Shared test helpers

Builders for Piston payloads and a recording fake backend.
"""
from typing import Any, Dict, List, Optional

from sandbox_gateway.domain.ports import IExecutionBackend
from sandbox_gateway.domain.value_objects import (
    BackendResult,
    ExecutionLimits,
    RuntimeSpec,
    StageResult,
)


def make_stage(
    code: Optional[int] = 0,
    status: Optional[str] = None,
    signal: Optional[str] = None,
    stdout: str = "",
    stderr: str = "",
    message: Optional[str] = None,
) -> StageResult:
    return StageResult(
        code=code,
        status=status,
        signal=signal,
        stdout=stdout,
        stderr=stderr,
        output=stdout + stderr,
        message=message,
    )


def make_result(
    run: Optional[StageResult] = None,
    compile: Optional[StageResult] = None,
) -> BackendResult:
    return BackendResult(language="python", version="3.10.0", compile=compile, run=run)


def piston_stage(
    code: Optional[int] = 0,
    stdout: str = "",
    stderr: str = "",
    signal: Optional[str] = None,
    status: Optional[str] = None,
    message: Optional[str] = None,
) -> Dict[str, Any]:
    """Stage dict shaped like Piston's JSON"""
    return {
        "stdout": stdout,
        "stderr": stderr,
        "output": stdout + stderr,
        "code": code,
        "signal": signal,
        "status": status,
        "message": message,
        "cpu_time": 12,
        "wall_time": 30,
        "memory": 8192,
    }


def piston_execute_response(
    run: Optional[Dict[str, Any]] = None,
    compile: Optional[Dict[str, Any]] = None,
    language: str = "python",
    version: str = "3.10.0",
) -> Dict[str, Any]:
    body: Dict[str, Any] = {"language": language, "version": version}
    if run is not None:
        body["run"] = run
    if compile is not None:
        body["compile"] = compile
    return body


class RecordingBackend(IExecutionBackend):
    """
    In-memory backend returning queued results or raising queued errors,
    and counting every call.
    """

    def __init__(
        self,
        execute_results: Optional[List[Any]] = None,
        catalog: Optional[List[RuntimeSpec]] = None,
        catalog_error: Optional[Exception] = None,
    ):
        self._execute_results = list(execute_results or [])
        self._catalog = catalog or []
        self._catalog_error = catalog_error
        self.execute_calls: List[RuntimeSpec] = []
        self.catalog_calls = 0

    @property
    def network_calls(self) -> int:
        return len(self.execute_calls) + self.catalog_calls

    async def execute(
        self,
        runtime: RuntimeSpec,
        code: str,
        stdin: str,
        limits: ExecutionLimits,
    ) -> BackendResult:
        self.execute_calls.append(runtime)
        item = self._execute_results.pop(0)
        if isinstance(item, Exception):
            raise item
        return item

    async def list_runtimes(self) -> List[RuntimeSpec]:
        self.catalog_calls += 1
        if self._catalog_error is not None:
            raise self._catalog_error
        return list(self._catalog)
