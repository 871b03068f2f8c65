"""
Pytest Configuration and Fixtures for TickTick Task Client Tests.

This module provides fixtures, fakes, and payload factories shared by the
test suite.

Architecture:
    - RecordingRequest: Async fake of the request function
    - TaskPayloadFactory: Raw Open API task payloads (camelCase dicts)
    - Fixtures: Configured operations, clients, and httpx mock transports
"""

from __future__ import annotations

import json
from typing import Any, AsyncIterator, Callable

import httpx
import pytest

from ticktick_tasks.api.tasks import TaskOperations
from ticktick_tasks.client import TickTickClient
from ticktick_tasks.constants import TICKTICK_API_BASE_V1, TaskPriority, TaskStatus


BASE_URL = TICKTICK_API_BASE_V1


# =============================================================================
# Pytest Configuration
# =============================================================================


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line("markers", "unit: Unit tests (fast, isolated)")
    config.addinivalue_line("markers", "tasks: Task operation tests")
    config.addinivalue_line("markers", "normalization: Timestamp normalization tests")
    config.addinivalue_line("markers", "validation: Input/response schema tests")
    config.addinivalue_line("markers", "transport: HTTP transport tests")
    config.addinivalue_line("markers", "errors: Error handling tests")
    config.addinivalue_line("markers", "lifecycle: Client lifecycle tests")
    config.addinivalue_line("markers", "server: MCP tool tests")


# =============================================================================
# ID Generators
# =============================================================================


class IDGenerator:
    """Sequential ID generator for test objects."""

    _counter: int = 0

    @classmethod
    def reset(cls) -> None:
        """Reset counter (call in fixtures)."""
        cls._counter = 0

    @classmethod
    def next_id(cls) -> str:
        """Generate next unique 24-character hex ID."""
        cls._counter += 1
        return f"{cls._counter:024x}"


# =============================================================================
# Test Data Factories
# =============================================================================


class TaskPayloadFactory:
    """Factory for raw task payloads as the Open API returns them."""

    @staticmethod
    def create(
        id: str | None = None,
        project_id: str | None = None,
        title: str = "Test Task",
        priority: int = TaskPriority.NONE,
        status: int = TaskStatus.ACTIVE,
        **extra: Any,
    ) -> dict[str, Any]:
        """Create a task payload with sensible defaults."""
        payload: dict[str, Any] = {
            "id": id or IDGenerator.next_id(),
            "projectId": project_id or IDGenerator.next_id(),
            "title": title,
            "priority": int(priority),
            "status": int(status),
            "timeZone": "America/Los_Angeles",
            "isAllDay": False,
            "sortOrder": -1099511627776,
            "kind": "CHECKLIST",
            "etag": "abc123de",
        }
        payload.update(extra)
        return payload

    @staticmethod
    def create_completed(completed_time: int | str = 1700000000000, **kwargs) -> dict[str, Any]:
        """Create a completed task payload with an epoch-millisecond timestamp."""
        return TaskPayloadFactory.create(
            status=TaskStatus.COMPLETED,
            completedTime=completed_time,
            **kwargs,
        )

    @staticmethod
    def create_with_items(count: int = 3, completed_time: Any = None, **kwargs) -> dict[str, Any]:
        """Create a task payload with checklist items."""
        items = []
        for i in range(count):
            item: dict[str, Any] = {
                "id": IDGenerator.next_id(),
                "title": f"Subtask {i + 1}",
                "status": 0,
                "sortOrder": i,
            }
            if completed_time is not None:
                item["completedTime"] = completed_time
                item["status"] = 1
            items.append(item)
        return TaskPayloadFactory.create(items=items, **kwargs)


# =============================================================================
# Fake Request Function
# =============================================================================


class RecordingRequest:
    """
    Fake request function for TaskOperations.

    Records every call and answers with a queued or default response.
    """

    def __init__(self, default_response: Any = None):
        self.default_response = default_response
        self.responses: list[Any] = []
        self.call_history: list[dict[str, Any]] = []
        self.should_fail: Exception | None = None

    def queue(self, *responses: Any) -> None:
        self.responses.extend(responses)

    async def __call__(self, url: str, *, method: str = "GET", body: Any = None) -> Any:
        self.call_history.append({"url": url, "method": method, "body": body})
        if self.should_fail is not None:
            raise self.should_fail
        if self.responses:
            return self.responses.pop(0)
        return self.default_response

    @property
    def last_call(self) -> dict[str, Any]:
        assert self.call_history, "request function was never called"
        return self.call_history[-1]

    def assert_called_once(self) -> dict[str, Any]:
        assert len(self.call_history) == 1, (
            f"Expected exactly one request, got {len(self.call_history)}"
        )
        return self.call_history[0]

    def assert_not_called(self) -> None:
        assert not self.call_history, f"Expected no request, got {self.call_history}"


# =============================================================================
# httpx Helpers
# =============================================================================


class CapturedRequests:
    """Collects requests seen by an httpx.MockTransport handler."""

    def __init__(self) -> None:
        self.requests: list[httpx.Request] = []

    @property
    def last(self) -> httpx.Request:
        return self.requests[-1]

    def last_json(self) -> Any:
        return json.loads(self.last.content) if self.last.content else None


def mock_http_client(
    handler: Callable[[httpx.Request], httpx.Response],
    captured: CapturedRequests | None = None,
) -> httpx.AsyncClient:
    """Build an httpx.AsyncClient that answers with ``handler``."""

    def recording_handler(request: httpx.Request) -> httpx.Response:
        if captured is not None:
            captured.requests.append(request)
        return handler(request)

    return httpx.AsyncClient(transport=httpx.MockTransport(recording_handler))


# =============================================================================
# Fixtures
# =============================================================================


@pytest.fixture
def id_generator():
    """Reset and provide ID generator."""
    IDGenerator.reset()
    return IDGenerator


@pytest.fixture
def task_factory() -> type[TaskPayloadFactory]:
    """Provide TaskPayloadFactory class."""
    return TaskPayloadFactory


@pytest.fixture
def recording_request() -> RecordingRequest:
    """Fresh fake request function answering with a minimal task."""
    return RecordingRequest(default_response={"id": "t1", "projectId": "p1", "title": "Task"})


@pytest.fixture
def operations(recording_request: RecordingRequest) -> TaskOperations:
    """TaskOperations wired to the fake request function."""
    return TaskOperations(recording_request)


@pytest.fixture
def captured() -> CapturedRequests:
    return CapturedRequests()


@pytest.fixture
async def client(captured: CapturedRequests) -> AsyncIterator[TickTickClient]:
    """
    Connected TickTickClient backed by httpx.MockTransport.

    Every request is answered with the task stored in ``client.mock_task``.
    """
    state: dict[str, Any] = {"task": TaskPayloadFactory.create(id="t1", project_id="p1")}

    def handler(request: httpx.Request) -> httpx.Response:
        if request.method == "DELETE" or request.url.path.endswith("/complete"):
            return httpx.Response(200)
        return httpx.Response(200, json=state["task"])

    http_client = mock_http_client(handler, captured)
    ticktick = TickTickClient(access_token="test_access_token", http_client=http_client)
    ticktick.mock_task = state  # type: ignore[attr-defined]

    await ticktick.connect()
    yield ticktick
    await ticktick.disconnect()
    await http_client.aclose()
