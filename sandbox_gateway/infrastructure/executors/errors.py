"""
Execution backend errors

Failures talking to the Piston backend. These are infrastructure failures;
a user's program failing to compile or crashing is never reported this way.
"""
from typing import Optional


class ExecutorError(Exception):
    """Base class for backend communication errors"""

    pass


class BackendUnreachableError(ExecutorError):
    """The request to the backend could not complete"""

    def __init__(self, backend_url: str, reason: str = ""):
        self.backend_url = backend_url
        self.reason = reason
        super().__init__(f"Failed to reach Piston at {backend_url}: {reason}")


class BackendError(ExecutorError):
    """The backend answered with a non-success status"""

    def __init__(self, message: str, status_code: Optional[int] = None):
        self.message = message
        self.status_code = status_code
        super().__init__(f"Piston API Error: {message}")
