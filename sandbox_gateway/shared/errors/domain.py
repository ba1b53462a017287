"""
Domain errors

Errors raised by the gateway's own rules, as opposed to failures talking to
the execution backend (see infrastructure.executors.errors).
"""
from typing import Any, Optional


class DomainError(Exception):
    """Base class for domain errors"""

    def __init__(self, message: str, details: Optional[dict[str, Any]] = None):
        self.message = message
        self.details = details or {}
        super().__init__(self.message)


class InvalidInputError(DomainError):
    """Structurally invalid run request (missing or blank code/language)"""
    pass


class UnsupportedLanguageError(DomainError):
    """Language id not present in the runtime registry"""

    def __init__(self, language: str):
        self.language = language
        super().__init__(f"Unsupported language: {language}", {"language": language})


class RuntimeResolutionFailedError(DomainError):
    """The backend rejected the runtime and no usable replacement was found"""

    def __init__(self, original_message: str, details: Optional[dict[str, Any]] = None):
        self.original_message = original_message
        super().__init__(
            f"Runtime resolution failed: {original_message}",
            details,
        )


class MalformedBackendResponseError(DomainError):
    """Backend answered with something that is neither a compile nor a run result"""

    def __init__(self, message: str = "Unexpected response from Piston", details: Optional[dict[str, Any]] = None):
        super().__init__(message, details)
