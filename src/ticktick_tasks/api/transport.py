"""
HTTP transport for the TickTick Open API.

TaskOperations never talks to httpx directly; it calls a request function
with the signature described by RequestFunction. TickTickTransport is the
default implementation, backed by a shared httpx.AsyncClient.
"""

from __future__ import annotations

import logging
from types import TracebackType
from typing import Any, Protocol, TypeVar

import httpx

from ticktick_tasks.constants import DEFAULT_TIMEOUT, TICKTICK_API_BASE_V1, USER_AGENT
from ticktick_tasks.exceptions import (
    TickTickAPIError,
    TickTickAuthenticationError,
    TickTickNotFoundError,
)

logger = logging.getLogger(__name__)

T = TypeVar("T", bound="TickTickTransport")


class RequestFunction(Protocol):
    """
    Request function contract.

    Takes a URL plus an optional method (default GET) and JSON body, and
    returns the parsed JSON response (None for an empty body). Raises on
    transport failures and non-2xx responses.
    """

    async def __call__(
        self,
        url: str,
        *,
        method: str = "GET",
        body: Any = None,
    ) -> Any: ...


class TickTickTransport:
    """
    Authenticated httpx transport for the Open API.

    Usage:
        async with TickTickTransport(access_token="...") as transport:
            task = await transport("/project/p1/task/t1")
    """

    def __init__(
        self,
        access_token: str,
        base_url: str = TICKTICK_API_BASE_V1,
        timeout: float = DEFAULT_TIMEOUT,
        http_client: httpx.AsyncClient | None = None,
    ) -> None:
        self._base_url = base_url.rstrip("/")
        self._owns_client = http_client is None
        self._client = http_client or httpx.AsyncClient(timeout=timeout)
        self._headers = {
            "Authorization": f"Bearer {access_token}",
            "Content-Type": "application/json",
            "Accept": "application/json",
            "User-Agent": USER_AGENT,
        }

    @property
    def base_url(self) -> str:
        return self._base_url

    def build_url(self, url: str) -> str:
        """Resolve a relative path against the base URL."""
        if url.startswith(("http://", "https://")):
            return url
        return f"{self._base_url}/{url.lstrip('/')}"

    async def request(
        self,
        url: str,
        *,
        method: str = "GET",
        body: Any = None,
    ) -> Any:
        """
        Send a request and decode the response.

        Args:
            url: Absolute URL or path relative to the base URL
            method: HTTP method
            body: JSON-serializable request body, or None for no body

        Returns:
            Parsed JSON, response text for non-JSON bodies, or None when empty

        Raises:
            TickTickAuthenticationError: On 401/403
            TickTickNotFoundError: On 404
            TickTickAPIError: On any other non-2xx status
            httpx.TransportError: On network failures
        """
        full_url = self.build_url(url)
        response = await self._client.request(
            method,
            full_url,
            headers=self._headers,
            json=body,
        )

        if not response.is_success:
            self._raise_for_status(response, method, full_url)

        if response.status_code == 204 or not response.content:
            return None

        content_type = response.headers.get("content-type", "")
        if "json" in content_type:
            return response.json()
        return response.text

    __call__ = request

    def _raise_for_status(self, response: httpx.Response, method: str, url: str) -> None:
        status = response.status_code
        body = response.text
        logger.warning("TickTick API %s %s failed with status %d", method, url, status)

        details = {"method": method, "url": url}
        if status in (401, 403):
            raise TickTickAuthenticationError(
                "TickTick rejected the access token",
                status_code=status,
                response_body=body,
                details=details,
            )
        if status == 404:
            raise TickTickNotFoundError(
                f"Resource not found: {url}",
                status_code=status,
                response_body=body,
                details=details,
            )
        raise TickTickAPIError(
            f"TickTick API error {status}: {body or response.reason_phrase}",
            status_code=status,
            response_body=body,
            details=details,
        )

    async def close(self) -> None:
        """Close the underlying HTTP client if this transport created it."""
        if self._owns_client:
            await self._client.aclose()

    async def __aenter__(self: T) -> T:
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> None:
        await self.close()
