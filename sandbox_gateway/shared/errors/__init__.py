"""
Shared error types.
"""
from sandbox_gateway.shared.errors.domain import (
    DomainError,
    InvalidInputError,
    UnsupportedLanguageError,
    RuntimeResolutionFailedError,
    MalformedBackendResponseError,
)

__all__ = [
    "DomainError",
    "InvalidInputError",
    "UnsupportedLanguageError",
    "RuntimeResolutionFailedError",
    "MalformedBackendResponseError",
]
