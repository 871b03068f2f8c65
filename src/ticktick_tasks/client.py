"""
TickTick Client.

TickTickClient owns the HTTP transport and the task operations, and exposes
the operations behind a connect/disconnect lifecycle.
"""

from __future__ import annotations

import logging
from types import TracebackType
from typing import TypeVar

import httpx

from ticktick_tasks.api.tasks import Params, TaskOperations
from ticktick_tasks.api.transport import TickTickTransport
from ticktick_tasks.constants import DEFAULT_TIMEOUT, TICKTICK_API_BASE_V1
from ticktick_tasks.exceptions import TickTickConfigurationError
from ticktick_tasks.models import Task
from ticktick_tasks.settings import TickTickSettings, get_settings

logger = logging.getLogger(__name__)

T = TypeVar("T", bound="TickTickClient")


class TickTickClient:
    """
    High-level client for TickTick task operations.

    Usage:
        async with TickTickClient(access_token="...") as client:
            task = await client.get_task_by_ids({"projectId": "p1", "taskId": "t1"})
            await client.complete_task({"projectId": "p1", "taskId": "t1"})
    """

    def __init__(
        self,
        access_token: str,
        base_url: str = TICKTICK_API_BASE_V1,
        timeout: float = DEFAULT_TIMEOUT,
        http_client: httpx.AsyncClient | None = None,
    ) -> None:
        self._access_token = access_token
        self._base_url = base_url
        self._timeout = timeout
        self._http_client = http_client

        self._transport: TickTickTransport | None = None
        self._tasks: TaskOperations | None = None

    @classmethod
    def from_settings(cls, settings: TickTickSettings | None = None) -> "TickTickClient":
        """Create a client from environment settings."""
        settings = settings or get_settings()
        if not settings.access_token:
            raise TickTickConfigurationError(
                "TICKTICK_ACCESS_TOKEN is not set",
                details={"setting": "access_token"},
            )
        return cls(
            access_token=settings.access_token,
            base_url=settings.api_base_url,
            timeout=settings.timeout,
        )

    # =========================================================================
    # Lifecycle
    # =========================================================================

    async def connect(self) -> None:
        """Open the HTTP transport. Calling it twice is a no-op."""
        if self._transport is not None:
            return

        self._transport = TickTickTransport(
            access_token=self._access_token,
            base_url=self._base_url,
            timeout=self._timeout,
            http_client=self._http_client,
        )
        self._tasks = TaskOperations(self._transport, base_url=self._base_url)
        logger.info("TickTick client connected to %s", self._base_url)

    async def disconnect(self) -> None:
        """Close the HTTP transport."""
        if self._transport is not None:
            await self._transport.close()
        self._transport = None
        self._tasks = None

    @property
    def is_connected(self) -> bool:
        return self._tasks is not None

    async def __aenter__(self: T) -> T:
        await self.connect()
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> None:
        await self.disconnect()

    @property
    def tasks(self) -> TaskOperations:
        """Task operations; requires a connected client."""
        if self._tasks is None:
            raise TickTickConfigurationError(
                "Client not connected. Use 'await client.connect()' or async context manager."
            )
        return self._tasks

    # =========================================================================
    # Task Operations
    # =========================================================================

    async def get_task_by_ids(self, params: Params) -> Task:
        return await self.tasks.get_task_by_ids(params)

    async def create_task(self, params: Params) -> Task:
        return await self.tasks.create_task(params)

    async def update_task(self, params: Params) -> Task:
        return await self.tasks.update_task(params)

    async def complete_task(self, params: Params) -> None:
        await self.tasks.complete_task(params)

    async def delete_task(self, params: Params) -> None:
        await self.tasks.delete_task(params)
