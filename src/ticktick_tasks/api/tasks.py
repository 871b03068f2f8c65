"""
TickTick Task Operations.

This module implements the five task endpoints of the Open API:

    - GET    /project/{projectId}/task/{taskId}
    - POST   /task
    - POST   /task/{taskId}
    - POST   /project/{projectId}/task/{taskId}/complete
    - DELETE /project/{projectId}/task/{taskId}

Every operation validates its parameters before touching the network,
issues exactly one request through the injected request function, and
validates the response against the Task model. Errors from either step
propagate to the caller unchanged.

Only the fetch path normalizes ``completedTime`` before validation.
Create and update responses are validated as received, so a numeric
``completedTime`` there fails validation. This asymmetry is kept for
compatibility with the upstream behaviour.

Project and task identifiers are percent-encoded as single path segments
(``a/b`` becomes ``a%2Fb``). TickTick identifiers are hex strings, so real
URLs are unchanged; the encoding only stops an identifier from adding path
segments of its own.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any, Union
from urllib.parse import quote

from pydantic import BaseModel

from ticktick_tasks.api.normalization import normalize_timestamps
from ticktick_tasks.api.transport import RequestFunction
from ticktick_tasks.constants import TICKTICK_API_BASE_V1
from ticktick_tasks.models import Task
from ticktick_tasks.tools.inputs import (
    TaskCreateInput,
    TaskGetInput,
    TaskIdsInput,
    TaskUpdateInput,
)

logger = logging.getLogger(__name__)

Params = Union[Mapping[str, Any], BaseModel]


def resolve_identifier(primary: str | None, secondary: str | None) -> str:
    """Return ``primary`` when it is non-empty, otherwise ``secondary``."""
    return primary or secondary or ""


def _segment(value: str) -> str:
    return quote(value, safe="")


class TaskOperations:
    """
    Task operations against the TickTick Open API.

    Usage:
        async with TickTickTransport(access_token="...") as transport:
            ops = TaskOperations(transport)
            task = await ops.get_task_by_ids({"projectId": "p1", "taskId": "t1"})
    """

    def __init__(
        self,
        request: RequestFunction,
        base_url: str = TICKTICK_API_BASE_V1,
    ) -> None:
        self._request = request
        self._base_url = base_url.rstrip("/")

    # =========================================================================
    # URL Construction
    # =========================================================================

    def task_url(self, project_id: str, task_id: str) -> str:
        return f"{self._base_url}/project/{_segment(project_id)}/task/{_segment(task_id)}"

    def create_url(self) -> str:
        return f"{self._base_url}/task"

    def update_url(self, task_id: str) -> str:
        return f"{self._base_url}/task/{_segment(task_id)}"

    def complete_url(self, project_id: str, task_id: str) -> str:
        return f"{self.task_url(project_id, task_id)}/complete"

    # =========================================================================
    # Operations
    # =========================================================================

    async def get_task_by_ids(self, params: Params) -> Task:
        """
        Fetch a single task.

        Args:
            params: ``projectId`` and ``taskId``

        Returns:
            The validated task, with ``completedTime`` values as ISO 8601 strings
        """
        validated = TaskGetInput.model_validate(params)
        url = self.task_url(validated.project_id, validated.task_id)

        logger.debug("GET %s", url)
        response = await self._request(url)

        return Task.model_validate(normalize_timestamps(response))

    async def create_task(self, params: Params) -> Task:
        """
        Create a task.

        Only the fields present in ``params`` are sent; no defaults are added.

        Args:
            params: ``title`` and ``projectId`` plus any optional task fields

        Returns:
            The created task
        """
        validated = TaskCreateInput.model_validate(params)
        url = self.create_url()

        logger.debug("POST %s", url)
        response = await self._request(url, method="POST", body=validated.to_body())

        return Task.model_validate(response)

    async def update_task(self, params: Params) -> Task:
        """
        Update a task.

        The URL uses ``taskId`` falling back to ``id``; the body's ``id`` uses
        ``id`` falling back to ``taskId``.

        Args:
            params: ``projectId``, ``taskId`` and/or ``id``, plus the fields to change

        Returns:
            The updated task
        """
        validated = TaskUpdateInput.model_validate(params)
        path_id = resolve_identifier(validated.task_id, validated.id)
        body_id = resolve_identifier(validated.id, validated.task_id)

        rest = validated.model_dump(
            by_alias=True,
            exclude_unset=True,
            exclude={"task_id", "id"},
        )
        body = {"id": body_id, **rest}
        url = self.update_url(path_id)

        logger.debug("POST %s", url)
        response = await self._request(url, method="POST", body=body)

        return Task.model_validate(response)

    async def complete_task(self, params: Params) -> None:
        """
        Mark a task as completed.

        Args:
            params: ``taskId`` and ``projectId``
        """
        validated = TaskIdsInput.model_validate(params)
        url = self.complete_url(validated.project_id, validated.task_id)

        logger.debug("POST %s", url)
        await self._request(url, method="POST")

    async def delete_task(self, params: Params) -> None:
        """
        Delete a task.

        Args:
            params: ``taskId`` and ``projectId``
        """
        validated = TaskIdsInput.model_validate(params)
        url = self.task_url(validated.project_id, validated.task_id)

        logger.debug("DELETE %s", url)
        await self._request(url, method="DELETE")
