"""
Pydantic Input Models for TickTick Task Operations.

This module defines the parameter schema of every task operation. The same
models validate direct client calls and MCP tool arguments. Fields are
accepted under their camelCase wire name (``projectId``) or their Python
name (``project_id``); unknown fields are rejected.
"""

from __future__ import annotations

from enum import Enum
from typing import Any, Optional, List

from pydantic import BaseModel, Field, ConfigDict, field_validator, model_validator
from pydantic.alias_generators import to_camel

from ticktick_tasks.constants import TaskPriority
from ticktick_tasks.models import ChecklistItem


class ResponseFormat(str, Enum):
    """Output format for tool responses."""

    MARKDOWN = "markdown"
    JSON = "json"


class BaseTaskInput(BaseModel):
    """Base input model with common configuration."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        validate_assignment=True,
        extra="forbid",
    )

    def to_body(self) -> dict:
        """Request body with only the fields the caller provided."""
        return self.model_dump(by_alias=True, exclude_unset=True)


# =============================================================================
# Task Input Models
# =============================================================================


class TaskGetInput(BaseTaskInput):
    """Input for fetching a task by project and task ID."""

    project_id: str = Field(..., description="Project identifier")
    task_id: str = Field(..., description="Task identifier")


class TaskFieldsInput(BaseTaskInput):
    """
    Optional task fields shared by create and update.

    Optional fields may be omitted but not set to null; an explicit None
    is rejected so it never reaches the API as a JSON null.

    ``priority`` is limited to the TickTick levels 0, 1, 3 and 5, and
    ``sortOrder`` must be an integer encoded as a string. Other numbers and
    free-form strings are rejected.
    """

    content: Optional[str] = Field(default=None, description="Task content")
    desc: Optional[str] = Field(default=None, description="Task description")
    is_all_day: Optional[bool] = Field(default=None, description="Is all day task")
    start_date: Optional[str] = Field(
        default=None,
        description="Task start date in \"yyyy-MM-dd'T'HH:mm:ssZ\" format",
    )
    due_date: Optional[str] = Field(
        default=None,
        description="Task due date in \"yyyy-MM-dd'T'HH:mm:ssZ\" format",
    )
    time_zone: Optional[str] = Field(
        default=None,
        description="Task time zone. Example: \"America/Los_Angeles\"",
    )
    reminders: Optional[List[str]] = Field(
        default=None,
        description=(
            "List of reminder triggers in iCalendar (RFC 5545) format. "
            "Example: [\"TRIGGER:P0DT9H0M0S\", \"TRIGGER:PT0S\"]"
        ),
    )
    repeat_flag: Optional[str] = Field(
        default=None,
        description="Task repeat flag in iCalendar (RFC 5545) format. Example: RRULE:FREQ=DAILY;INTERVAL=1",
    )
    priority: Optional[int] = Field(
        default=None,
        description="Task priority None: 0, Low: 1, Medium: 3, High: 5",
    )
    sort_order: Optional[str] = Field(
        default=None,
        description="Task sort order. Example: 12345",
        pattern=r"^-?\d+$",
    )
    items: Optional[List[ChecklistItem]] = Field(
        default=None,
        description="The list of subtasks",
    )

    @field_validator(
        "content",
        "desc",
        "is_all_day",
        "start_date",
        "due_date",
        "time_zone",
        "reminders",
        "repeat_flag",
        "priority",
        "sort_order",
        "items",
        "title",
        mode="before",
        check_fields=False,
    )
    @classmethod
    def reject_null(cls, v: Any) -> Any:
        if v is None:
            raise ValueError("field may be omitted but must not be null")
        return v

    @field_validator("priority")
    @classmethod
    def validate_priority(cls, v: Optional[int]) -> Optional[int]:
        if v is None:
            return None
        if v not in {p.value for p in TaskPriority}:
            raise ValueError("priority must be one of 0 (none), 1 (low), 3 (medium), 5 (high)")
        return v


class TaskCreateInput(TaskFieldsInput):
    """Input for creating a new task."""

    title: str = Field(..., description="Task title")
    project_id: str = Field(..., description="Project id")


class TaskUpdateInput(TaskFieldsInput):
    """
    Input for updating a task.

    The Open API wants the task identifier both in the URL path and in the
    request body. Callers may pass it as ``taskId`` (path), ``id`` (body),
    or both; at least one must be non-empty.
    """

    task_id: str = Field(default="", description="Task identifier - Path")
    id: str = Field(default="", description="Task identifier - Body")
    project_id: str = Field(..., description="Project id")
    title: Optional[str] = Field(default=None, description="Task title")

    @model_validator(mode="after")
    def require_identifier(self) -> "TaskUpdateInput":
        if not self.task_id and not self.id:
            raise ValueError("either taskId or id must be a non-empty task identifier")
        return self


class TaskIdsInput(BaseTaskInput):
    """Input for completing or deleting a task."""

    task_id: str = Field(..., description="Task identifier")
    project_id: str = Field(..., description="Project identifier")
