"""
Code execution REST API routes
"""
from fastapi import APIRouter, Depends, status

from sandbox_gateway.application.commands.run_code import RunCodeCommand
from sandbox_gateway.application.services.code_execution_service import CodeExecutionService
from sandbox_gateway.infrastructure.config.settings import Settings, get_settings
from sandbox_gateway.infrastructure.dependencies import get_code_execution_service
from sandbox_gateway.interfaces.rest.schemas.request import RunCodeRequest
from sandbox_gateway.interfaces.rest.schemas.response import (
    ErrorResponse,
    RunCodeResponse,
    RuntimeListResponse,
    RuntimeResponse,
)

router = APIRouter(prefix="/code", tags=["code"])


@router.post(
    "/runCodeSandbox",
    response_model=RunCodeResponse,
    response_model_exclude_none=True,
    status_code=status.HTTP_200_OK,
    responses={
        status.HTTP_400_BAD_REQUEST: {"model": ErrorResponse},
        status.HTTP_500_INTERNAL_SERVER_ERROR: {"model": ErrorResponse},
    },
)
async def run_code_sandbox(
    request: RunCodeRequest,
    service: CodeExecutionService = Depends(get_code_execution_service),
    settings: Settings = Depends(get_settings),
):
    """
    Run a snippet in the sandbox

    Compile errors, crashes and timeouts of the submitted program are normal
    200 responses; only gateway or backend failures are errors.

    - **code**: source code
    - **language**: python, javascript, typescript, cpp, java, csharp, go, rust, sqlite3
    - **stdin**: optional standard input
    - **timeLimit** / **memoryLimit**: optional, clamped to 3 s / 128000 KB
    """
    command = RunCodeCommand(
        code=request.code,
        language=request.language,
        stdin="" if request.stdin is None else request.stdin,
        time_limit_seconds=(
            settings.default_time_limit_seconds
            if request.time_limit_seconds is None
            else request.time_limit_seconds
        ),
        memory_limit_kb=(
            settings.default_memory_limit_kb
            if request.memory_limit_kb is None
            else request.memory_limit_kb
        ),
    )

    outcome = await service.run_code(command)
    return RunCodeResponse(**outcome.to_dict())


@router.get("/runtimes", response_model=RuntimeListResponse)
async def list_runtimes(
    service: CodeExecutionService = Depends(get_code_execution_service),
) -> RuntimeListResponse:
    """Languages and default runtime versions the gateway accepts"""
    return RuntimeListResponse(
        runtimes=[
            RuntimeResponse(language=language, version=runtime.version)
            for language, runtime in service.runtimes().items()
        ]
    )
