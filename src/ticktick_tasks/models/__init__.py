"""
TickTick Data Models.

Pydantic models for the task payloads exchanged with the TickTick Open API.

Models:
    - Task: A task owned by a project
    - ChecklistItem: Subtask/checklist item of a task
"""

from ticktick_tasks.models.task import Task, ChecklistItem, TickTickModel

__all__ = [
    "Task",
    "ChecklistItem",
    "TickTickModel",
]
