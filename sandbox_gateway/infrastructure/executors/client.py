"""
Piston HTTP client

Talks to a self-hosted Piston instance. One method call is exactly one HTTP
request; retries and runtime fallback belong to the caller.
"""
from typing import Any, List, Optional

import httpx
from pydantic import ValidationError

from sandbox_gateway.domain.ports import IExecutionBackend
from sandbox_gateway.domain.value_objects import (
    BackendResult,
    ExecutionLimits,
    RuntimeSpec,
)
from sandbox_gateway.infrastructure.executors.dto import (
    PistonExecuteRequest,
    PistonExecuteResponse,
    PistonRuntime,
)
from sandbox_gateway.infrastructure.executors.errors import (
    BackendError,
    BackendUnreachableError,
)
from sandbox_gateway.infrastructure.logging import get_logger
from sandbox_gateway.shared.errors.domain import MalformedBackendResponseError

logger = get_logger(__name__)

EXECUTE_PATH = "/api/v2/piston/execute"
RUNTIMES_PATH = "/api/v2/piston/runtimes"


class PistonClient(IExecutionBackend):
    """
    Piston execution backend client

    The transport timeout defaults to None: compile and run limits are enforced
    by Piston itself, so callers that need protection against a hung
    connection must pass an explicit timeout.
    """

    def __init__(
        self,
        base_url: str = "http://localhost:2000",
        timeout: Optional[float] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        """
        Args:
            base_url: Piston base URL, without the /api/v2 suffix
            timeout: Transport timeout in seconds, None for no timeout
            transport: Custom httpx transport (used by tests)
        """
        self._base_url = base_url.rstrip("/")
        self._timeout = timeout
        self._transport = transport
        self._client: Optional[httpx.AsyncClient] = None

    @property
    def base_url(self) -> str:
        return self._base_url

    async def __aenter__(self):
        self._get_client()
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        await self.close()

    def _get_client(self) -> httpx.AsyncClient:
        if self._client is None:
            self._client = httpx.AsyncClient(
                timeout=self._timeout,
                transport=self._transport,
            )
        return self._client

    async def execute(
        self,
        runtime: RuntimeSpec,
        code: str,
        stdin: str,
        limits: ExecutionLimits,
    ) -> BackendResult:
        """
        Submit one snippet to Piston.

        Raises:
            BackendUnreachableError: the request could not complete
            BackendError: Piston returned a non-2xx status
            MalformedBackendResponseError: 2xx body is not an execute result
        """
        request = PistonExecuteRequest.build(runtime, code, stdin, limits)
        logger.info(
            "Submitting execution to Piston",
            runtime=str(runtime),
            run_timeout_ms=request.run_timeout,
            run_memory_limit=request.run_memory_limit,
        )

        response = await self._send("POST", EXECUTE_PATH, json=request.model_dump())
        body = self._parse_json(response)
        if not isinstance(body, dict):
            raise MalformedBackendResponseError(
                "Unexpected response from Piston", {"body": body}
            )
        try:
            return PistonExecuteResponse.model_validate(body).to_domain()
        except ValidationError as e:
            raise MalformedBackendResponseError(
                "Unexpected response from Piston", {"errors": e.errors()}
            )

    async def list_runtimes(self) -> List[RuntimeSpec]:
        """
        Fetch the Piston runtime catalog.

        Raises:
            BackendUnreachableError: the request could not complete
            BackendError: Piston returned a non-2xx status
            MalformedBackendResponseError: body is not a list of runtimes
        """
        response = await self._send("GET", RUNTIMES_PATH)
        body = self._parse_json(response)
        if not isinstance(body, list):
            raise MalformedBackendResponseError(
                "Unexpected runtime catalog from Piston", {"body": body}
            )
        try:
            return [PistonRuntime.model_validate(entry).to_domain() for entry in body]
        except ValidationError as e:
            raise MalformedBackendResponseError(
                "Unexpected runtime catalog from Piston", {"errors": e.errors()}
            )

    async def _send(self, method: str, path: str, **kwargs: Any) -> httpx.Response:
        client = self._get_client()
        url = f"{self._base_url}{path}"

        try:
            response = await client.request(
                method,
                url,
                headers={"Content-Type": "application/json"},
                **kwargs,
            )
        except httpx.TimeoutException as e:
            raise BackendUnreachableError(
                self._base_url, f"timed out after {self._timeout}s ({e.__class__.__name__})"
            )
        except httpx.TransportError as e:
            raise BackendUnreachableError(self._base_url, str(e) or e.__class__.__name__)

        if not response.is_success:
            message = self._error_message(response)
            logger.error(
                "Piston error response",
                method=method,
                url=url,
                status_code=response.status_code,
                detail=response.text,
            )
            raise BackendError(message, response.status_code)

        return response

    @staticmethod
    def _parse_json(response: httpx.Response) -> Any:
        try:
            return response.json()
        except ValueError:
            raise MalformedBackendResponseError(
                "Unexpected response from Piston", {"body": response.text}
            )

    @staticmethod
    def _error_message(response: httpx.Response) -> str:
        """Error message from the body, else the status code and reason"""
        try:
            body = response.json()
        except ValueError:
            body = None

        if isinstance(body, dict) and body.get("message"):
            return str(body["message"])
        return f"{response.status_code} {response.reason_phrase}".strip()

    async def close(self) -> None:
        if self._client:
            await self._client.aclose()
            self._client = None
