"""
Code execution service unit tests
"""
import pytest
from unittest.mock import AsyncMock, Mock

from sandbox_gateway.application.commands.run_code import RunCodeCommand
from sandbox_gateway.application.services.code_execution_service import CodeExecutionService
from sandbox_gateway.domain.services.runtime_registry import RuntimeRegistry
from sandbox_gateway.domain.value_objects import ExecutionLimits, OutcomeKind, RuntimeSpec
from sandbox_gateway.infrastructure.executors.errors import BackendError
from sandbox_gateway.shared.errors.domain import (
    MalformedBackendResponseError,
    UnsupportedLanguageError,
)
from tests.helpers import RecordingBackend, make_result, make_stage


class TestCodeExecutionService:
    """Run code use case tests"""

    @pytest.fixture
    def backend(self):
        """Mock execution backend"""
        backend = Mock()
        backend.execute = AsyncMock(return_value=make_result(run=make_stage(code=0, stdout="hi\n")))
        backend.list_runtimes = AsyncMock(return_value=[])
        return backend

    @pytest.fixture
    def service(self, backend):
        return CodeExecutionService(registry=RuntimeRegistry(), backend=backend)

    @pytest.mark.asyncio
    async def test_run_code_success(self, service, backend):
        command = RunCodeCommand(code="print('hi')", language="Python")

        outcome = await service.run_code(command)

        assert outcome.kind == OutcomeKind.SUCCESS
        assert outcome.to_dict() == {"message": "Code executed successfully", "output": "hi\n"}
        backend.execute.assert_awaited_once_with(
            RuntimeSpec("python", "3.10.0"),
            "print('hi')",
            "",
            ExecutionLimits(time_limit_seconds=3, memory_limit_kb=128000),
        )

    @pytest.mark.asyncio
    async def test_limits_are_clamped_before_backend(self, service, backend):
        command = RunCodeCommand(
            code="int main(){}",
            language="cpp",
            stdin="5\n",
            time_limit_seconds=60,
            memory_limit_kb=0,
        )

        await service.run_code(command)

        runtime, code, stdin, limits = backend.execute.await_args.args
        assert runtime == RuntimeSpec("cpp", "10.2.0")
        assert stdin == "5\n"
        assert limits.time_limit_seconds == 3
        assert limits.memory_limit_kb == 128000

    @pytest.mark.asyncio
    async def test_in_range_limits_pass_through(self, service, backend):
        command = RunCodeCommand(
            code="print(1)",
            language="python",
            time_limit_seconds=1.5,
            memory_limit_kb=32000,
        )

        await service.run_code(command)

        limits = backend.execute.await_args.args[3]
        assert limits.run_timeout_ms == 1500
        assert limits.memory_limit_bytes == 32000 * 1024

    @pytest.mark.asyncio
    async def test_unsupported_language_never_calls_backend(self, service, backend):
        command = RunCodeCommand(code="puts 1", language="ruby")

        with pytest.raises(UnsupportedLanguageError):
            await service.run_code(command)

        backend.execute.assert_not_awaited()
        backend.list_runtimes.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_compile_error_is_an_outcome(self, service, backend):
        backend.execute.return_value = make_result(
            compile=make_stage(code=1, stderr="error: expected ';'"),
        )

        outcome = await service.run_code(RunCodeCommand(code="int main(){", language="cpp"))

        assert outcome.kind == OutcomeKind.COMPILE_ERROR
        assert outcome.output == "error: expected ';'"

    @pytest.mark.asyncio
    async def test_malformed_result_raises(self, service, backend):
        backend.execute.return_value = make_result()

        with pytest.raises(MalformedBackendResponseError):
            await service.run_code(RunCodeCommand(code="print(1)", language="python"))

    @pytest.mark.asyncio
    async def test_fallback_bounds_execute_calls(self):
        """Unknown runtime: one catalog query, one retry, never more than two executions"""
        backend = RecordingBackend(
            execute_results=[
                BackendError("python-3.10.0 runtime is unknown", 400),
                make_result(run=make_stage(code=0, stdout="hi")),
            ],
            catalog=[RuntimeSpec("python", "3.12.0")],
        )
        service = CodeExecutionService(registry=RuntimeRegistry(), backend=backend)

        outcome = await service.run_code(RunCodeCommand(code="print('hi')", language="python"))

        assert outcome.output == "hi"
        assert backend.execute_calls == [
            RuntimeSpec("python", "3.10.0"),
            RuntimeSpec("python", "3.12.0"),
        ]
        assert backend.catalog_calls == 1

    def test_runtimes(self, service):
        runtimes = service.runtimes()

        assert runtimes["java"] == RuntimeSpec("java", "15.0.2")
        assert len(runtimes) == 9
