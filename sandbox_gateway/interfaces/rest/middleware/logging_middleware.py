"""
Request logging middleware

Every log event emitted while a request is handled carries its request_id,
so a run can be followed from the HTTP layer through the Piston calls.
"""
import time
import uuid
from typing import Callable

from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware

from sandbox_gateway.infrastructure.logging import bind_context, clear_context, get_logger

logger = get_logger(__name__)

REQUEST_ID_HEADER = "X-Request-ID"
PROCESS_TIME_HEADER = "X-Process-Time"
MAX_REQUEST_ID_LENGTH = 128

# Polled by load balancers; only logged at debug
QUIET_PATHS = frozenset({"/api/health"})


def _request_id(request: Request) -> str:
    """Caller-supplied id when usable, otherwise a fresh uuid4"""
    incoming = request.headers.get(REQUEST_ID_HEADER, "").strip()
    if incoming and len(incoming) <= MAX_REQUEST_ID_LENGTH and incoming.isprintable():
        return incoming
    return str(uuid.uuid4())


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """
    Binds request context for structlog and stamps the response with
    X-Request-ID and X-Process-Time.
    """

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        request_id = _request_id(request)
        request.state.request_id = request_id
        path = request.url.path
        bind_context(request_id=request_id, method=request.method, path=path)

        started = time.perf_counter()
        try:
            response = await call_next(request)
        except Exception:
            logger.exception(
                "Request failed",
                duration_ms=round((time.perf_counter() - started) * 1000, 1),
            )
            raise
        else:
            elapsed = time.perf_counter() - started
            response.headers[REQUEST_ID_HEADER] = request_id
            response.headers[PROCESS_TIME_HEADER] = f"{elapsed:.3f}"

            if path in QUIET_PATHS:
                log = logger.debug
            elif response.status_code >= 500:
                log = logger.warning
            else:
                log = logger.info
            log(
                "Request completed",
                status_code=response.status_code,
                duration_ms=round(elapsed * 1000, 1),
            )
            return response
        finally:
            clear_context()
