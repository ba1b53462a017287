from sandbox_gateway.domain.services.runtime_registry import (
    DEFAULT_RUNTIMES,
    RuntimeRegistry,
)
from sandbox_gateway.domain.services.result_classifier import classify

__all__ = ["DEFAULT_RUNTIMES", "RuntimeRegistry", "classify"]
