"""
Piston API data transfer objects

Wire models for the Piston v2 execute and runtimes endpoints.
"""
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from sandbox_gateway.domain.value_objects import (
    BackendResult,
    COMPILE_TIMEOUT_MS,
    ExecutionLimits,
    RuntimeSpec,
    StageResult,
)


class PistonFile(BaseModel):
    """Single source file"""
    content: str


class PistonExecuteRequest(BaseModel):
    """
    Execute request body

    Maps to POST /api/v2/piston/execute.
    """

    language: str = Field(..., description="Runtime language")
    version: str = Field(..., description="Runtime version")
    files: List[PistonFile] = Field(..., min_length=1)
    stdin: str = Field(default="")
    args: List[str] = Field(default_factory=list)
    compile_timeout: int = Field(default=COMPILE_TIMEOUT_MS, description="Compile timeout in ms")
    run_timeout: int = Field(..., description="Run timeout in ms")
    run_memory_limit: int = Field(..., description="Run memory limit in bytes")

    @classmethod
    def build(
        cls,
        runtime: RuntimeSpec,
        code: str,
        stdin: str,
        limits: ExecutionLimits,
    ) -> "PistonExecuteRequest":
        return cls(
            language=runtime.language,
            version=runtime.version,
            files=[PistonFile(content=code)],
            stdin=stdin,
            args=[],
            run_timeout=limits.run_timeout_ms,
            run_memory_limit=limits.memory_limit_bytes,
        )


class PistonStage(BaseModel):
    """Compile or run stage of an execute response"""

    model_config = ConfigDict(extra="ignore")

    code: Optional[int] = None
    status: Optional[str] = None
    signal: Optional[str] = None
    stdout: str = ""
    stderr: str = ""
    output: str = ""
    message: Optional[str] = None

    @field_validator("stdout", "stderr", "output", mode="before")
    @classmethod
    def _none_as_empty(cls, v):
        return "" if v is None else v

    def to_domain(self) -> StageResult:
        return StageResult(
            code=self.code,
            status=self.status,
            signal=self.signal,
            stdout=self.stdout,
            stderr=self.stderr,
            output=self.output,
            message=self.message,
        )


class PistonExecuteResponse(BaseModel):
    """Execute response body"""

    model_config = ConfigDict(extra="ignore")

    language: Optional[str] = None
    version: Optional[str] = None
    compile: Optional[PistonStage] = None
    run: Optional[PistonStage] = None

    def to_domain(self) -> BackendResult:
        return BackendResult(
            language=self.language,
            version=self.version,
            compile=self.compile.to_domain() if self.compile else None,
            run=self.run.to_domain() if self.run else None,
        )


class PistonRuntime(BaseModel):
    """Runtime catalog entry from GET /api/v2/piston/runtimes"""

    model_config = ConfigDict(extra="ignore")

    language: str
    version: str
    aliases: List[str] = Field(default_factory=list)
    runtime: Optional[str] = None

    def to_domain(self) -> RuntimeSpec:
        return RuntimeSpec(language=self.language, version=self.version)

