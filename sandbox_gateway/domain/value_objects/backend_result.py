"""
Backend result value objects

Raw compile/run stage results as reported by the execution backend. Nothing
here interprets them; see domain.services.result_classifier.
"""
from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class StageResult:
    """
    One backend stage (compile or run).

    Attributes:
        code: Process exit code, None when the process was terminated by a signal
        status: Short status token, e.g. "TO" (timeout), "SG" (signal), "RE"
        signal: Terminating signal name, e.g. "SIGKILL"
    """
    code: Optional[int] = None
    status: Optional[str] = None
    signal: Optional[str] = None
    stdout: str = ""
    stderr: str = ""
    output: str = ""
    message: Optional[str] = None


@dataclass(frozen=True)
class BackendResult:
    """Parsed execute response"""
    language: Optional[str] = None
    version: Optional[str] = None
    compile: Optional[StageResult] = None
    run: Optional[StageResult] = None
