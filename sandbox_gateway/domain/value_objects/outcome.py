"""
Outcome value object

The caller-facing result of one run. A compile error or a crashing program is
still a successful classification, not an error.
"""
from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Optional

PROCESS_KILLED_OUTPUT = "Process killed. Possible Memory Limit Exceeded."


class OutcomeKind(str, Enum):
    """Outcome kinds"""
    SUCCESS = "success"
    COMPILE_ERROR = "compile_error"
    COMPILE_TIMEOUT = "compile_timeout"
    EXECUTION_TIMEOUT = "execution_timeout"
    RUNTIME_ERROR = "runtime_error"
    PROCESS_KILLED = "process_killed"


_MESSAGES = {
    OutcomeKind.SUCCESS: "Code executed successfully",
    OutcomeKind.COMPILE_ERROR: "Compilation Error",
    OutcomeKind.COMPILE_TIMEOUT: "Compilation Time Limit Exceeded",
    OutcomeKind.EXECUTION_TIMEOUT: "Time Limit Exceeded",
    OutcomeKind.RUNTIME_ERROR: "Runtime Error",
    OutcomeKind.PROCESS_KILLED: "Runtime Error (Process Killed)",
}


@dataclass(frozen=True)
class Outcome:
    """Classified run result (immutable)"""
    kind: OutcomeKind
    output: Optional[str] = None

    @property
    def message(self) -> str:
        return _MESSAGES[self.kind]

    def is_success(self) -> bool:
        return self.kind == OutcomeKind.SUCCESS

    def to_dict(self) -> Dict[str, Any]:
        """Response body; output is omitted for kinds that carry none"""
        body: Dict[str, Any] = {"message": self.message}
        if self.output is not None:
            body["output"] = self.output
        return body

    @classmethod
    def success(cls, output: str) -> "Outcome":
        return cls(OutcomeKind.SUCCESS, output)

    @classmethod
    def compile_error(cls, output: Optional[str]) -> "Outcome":
        return cls(OutcomeKind.COMPILE_ERROR, output)

    @classmethod
    def compile_timeout(cls) -> "Outcome":
        return cls(OutcomeKind.COMPILE_TIMEOUT)

    @classmethod
    def execution_timeout(cls) -> "Outcome":
        return cls(OutcomeKind.EXECUTION_TIMEOUT)

    @classmethod
    def runtime_error(cls, output: Optional[str]) -> "Outcome":
        return cls(OutcomeKind.RUNTIME_ERROR, output)

    @classmethod
    def process_killed(cls) -> "Outcome":
        return cls(OutcomeKind.PROCESS_KILLED, PROCESS_KILLED_OUTPUT)
