"""
FastAPI application

Entry point of the sandbox code gateway.
"""
from contextlib import asynccontextmanager
from typing import AsyncGenerator, Optional

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

# Configure logging before the routes create their loggers
from sandbox_gateway.infrastructure.config.settings import Settings, get_settings
from sandbox_gateway.infrastructure.logging import configure_logging, get_logger

_settings = get_settings()
configure_logging(
    log_level=_settings.log_level,
    log_format=_settings.log_format,
)

logger = get_logger(__name__)

from sandbox_gateway.application.commands.run_code import REQUIRED_MESSAGE
from sandbox_gateway.infrastructure.dependencies import (
    cleanup_dependencies,
    initialize_dependencies,
)
from sandbox_gateway.infrastructure.executors.errors import ExecutorError
from sandbox_gateway.interfaces.rest.api.v1 import code, health
from sandbox_gateway.interfaces.rest.middleware import RequestLoggingMiddleware
from sandbox_gateway.shared.errors.domain import DomainError, InvalidInputError

RUN_FAILED_MESSAGE = "Failed to run code"


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Build shared dependencies on startup, release them on shutdown"""
    logger.info("Starting Sandbox Code Gateway")
    initialize_dependencies(app, app.state.settings)

    yield

    logger.info("Shutting down Sandbox Code Gateway")
    await cleanup_dependencies(app)


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """
    Create the FastAPI application

    Factory form so tests can build isolated instances.
    """
    settings = settings or get_settings()

    app = FastAPI(
        title=settings.app_name,
        description="Sandboxed code execution gateway in front of Piston",
        version=settings.app_version,
        debug=settings.debug,
        lifespan=lifespan,
    )
    app.state.settings = settings

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    _register_exception_handlers(app)
    app.add_middleware(RequestLoggingMiddleware)
    _register_routes(app)

    return app


def _register_exception_handlers(app: FastAPI) -> None:
    """Map gateway errors to HTTP responses"""

    @app.exception_handler(InvalidInputError)
    async def invalid_input_handler(request: Request, exc: InvalidInputError) -> JSONResponse:
        logger.warning("Invalid run request", error=exc.message)
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={"message": exc.message},
        )

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
        logger.warning("Unparseable request body", errors=str(exc.errors()))
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={"message": REQUIRED_MESSAGE},
        )

    # UnsupportedLanguageError is caller input but still reported as a 500
    @app.exception_handler(DomainError)
    async def domain_error_handler(request: Request, exc: DomainError) -> JSONResponse:
        logger.error(
            "Code run failed",
            error_type=type(exc).__name__,
            error=str(exc),
            details=exc.details,
        )
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"message": RUN_FAILED_MESSAGE, "error": str(exc)},
        )

    @app.exception_handler(ExecutorError)
    async def executor_error_handler(request: Request, exc: ExecutorError) -> JSONResponse:
        logger.error(
            "Execution backend failure",
            error_type=type(exc).__name__,
            error=str(exc),
        )
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"message": RUN_FAILED_MESSAGE, "error": str(exc)},
        )


def _register_routes(app: FastAPI) -> None:
    app.include_router(health.router, prefix="/api")
    app.include_router(code.router, prefix="/api")

    @app.get("/", tags=["root"])
    async def root() -> dict:
        settings = app.state.settings
        return {
            "name": settings.app_name,
            "version": settings.app_version,
            "status": "operational",
            "backend": settings.piston_url,
            "documentation": {
                "swagger": "/docs",
                "redoc": "/redoc",
                "openapi": "/openapi.json",
            },
        }


app = create_app()
