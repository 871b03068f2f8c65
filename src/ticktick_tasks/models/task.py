"""
Task and ChecklistItem response models.

These models describe the task payload returned by the TickTick Open API.
Attributes are snake_case in Python and camelCase on the wire. Fields the
models do not know about are kept as extra attributes instead of being
rejected, so new server-side fields never break validation.
"""

from __future__ import annotations

from typing import Optional, List, Union

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from ticktick_tasks.constants import TaskPriority, TaskStatus


class TickTickModel(BaseModel):
    """Base model for wire payloads."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="allow",
    )


class ChecklistItem(TickTickModel):
    """A subtask (checklist item) belonging to a task."""

    id: Optional[str] = None
    title: Optional[str] = None
    status: Optional[int] = None
    completed_time: Optional[str] = Field(
        default=None,
        description="Completion time as an ISO 8601 string",
    )
    is_all_day: Optional[bool] = None
    sort_order: Optional[Union[int, str]] = None
    start_date: Optional[str] = None
    time_zone: Optional[str] = None


class Task(TickTickModel):
    """A task as returned by the Open API."""

    id: str
    project_id: Optional[str] = None
    title: Optional[str] = None
    content: Optional[str] = None
    desc: Optional[str] = None
    is_all_day: Optional[bool] = None
    start_date: Optional[str] = None
    due_date: Optional[str] = None
    time_zone: Optional[str] = None
    reminders: Optional[List[str]] = None
    repeat_flag: Optional[str] = None
    priority: Optional[int] = None
    sort_order: Optional[Union[int, str]] = None
    status: Optional[int] = None
    kind: Optional[str] = None
    etag: Optional[str] = None
    completed_time: Optional[str] = Field(
        default=None,
        description="Completion time as an ISO 8601 string",
    )
    items: List[ChecklistItem] = Field(default_factory=list)

    @property
    def is_completed(self) -> bool:
        return self.status == TaskStatus.COMPLETED or self.completed_time is not None

    @property
    def priority_label(self) -> str:
        return TaskPriority.label(self.priority)
