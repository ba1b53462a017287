"""
Logging infrastructure for the gateway.
"""

from sandbox_gateway.infrastructure.logging.logging_config import (
    configure_logging,
    get_logger,
    bind_context,
    clear_context,
)

__all__ = [
    "configure_logging",
    "get_logger",
    "bind_context",
    "clear_context",
]
