"""
Dependency wiring

Builds the process-wide objects once at startup and exposes them to routes.
"""
from typing import Optional

from fastapi import FastAPI, Request

from sandbox_gateway.application.services.code_execution_service import CodeExecutionService
from sandbox_gateway.domain.services.runtime_registry import RuntimeRegistry
from sandbox_gateway.infrastructure.config.settings import Settings, get_settings
from sandbox_gateway.infrastructure.executors import PistonClient
from sandbox_gateway.infrastructure.logging import get_logger

logger = get_logger(__name__)


def initialize_dependencies(app: FastAPI, settings: Optional[Settings] = None) -> None:
    """Create the registry, Piston client and service and store them on app.state"""
    settings = settings or get_settings()

    registry = RuntimeRegistry()
    piston_client = PistonClient(
        base_url=settings.piston_url,
        timeout=settings.piston_timeout,
    )

    app.state.runtime_registry = registry
    app.state.piston_client = piston_client
    app.state.code_execution_service = CodeExecutionService(
        registry=registry,
        backend=piston_client,
    )
    logger.info(
        "Dependencies initialized",
        piston_url=piston_client.base_url,
        languages=",".join(registry.languages()),
    )


async def cleanup_dependencies(app: FastAPI) -> None:
    """Close the Piston client"""
    piston_client = getattr(app.state, "piston_client", None)
    if piston_client is not None:
        await piston_client.close()


def get_code_execution_service(request: Request) -> CodeExecutionService:
    """FastAPI dependency returning the shared service"""
    return request.app.state.code_execution_service
