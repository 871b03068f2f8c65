"""
Response formatting for MCP tools.

Tasks are rendered either as Markdown for people or as JSON-ready dicts
using the Open API's camelCase field names.
"""

from __future__ import annotations

import json
from typing import Any

from ticktick_tasks.models import Task


def format_task_markdown(task: Task) -> str:
    """Render a task as Markdown."""
    checkbox = "[x]" if task.is_completed else "[ ]"
    lines = [f"## {checkbox} {task.title or '(untitled)'}", ""]

    lines.append(f"- **ID**: `{task.id}`")
    if task.project_id:
        lines.append(f"- **Project**: `{task.project_id}`")
    if task.priority:
        lines.append(f"- **Priority**: {task.priority_label}")
    if task.start_date:
        lines.append(f"- **Start**: {task.start_date}")
    if task.due_date:
        lines.append(f"- **Due**: {task.due_date}")
    if task.time_zone:
        lines.append(f"- **Time zone**: {task.time_zone}")
    if task.repeat_flag:
        lines.append(f"- **Repeats**: `{task.repeat_flag}`")
    if task.reminders:
        lines.append(f"- **Reminders**: {', '.join(task.reminders)}")
    if task.completed_time:
        lines.append(f"- **Completed**: {task.completed_time}")

    if task.content:
        lines.extend(["", task.content])
    if task.desc:
        lines.extend(["", task.desc])

    if task.items:
        lines.extend(["", "### Checklist"])
        for item in task.items:
            mark = "x" if item.completed_time or item.status else " "
            lines.append(f"- [{mark}] {item.title or item.id}")

    return "\n".join(lines)


def format_task_json(task: Task) -> dict[str, Any]:
    """Render a task as a JSON-serializable dict."""
    return task.model_dump(by_alias=True, exclude_none=True)


def format_task(task: Task, as_json: bool) -> str:
    if as_json:
        return json.dumps(format_task_json(task), indent=2)
    return format_task_markdown(task)


def success_message(message: str) -> str:
    return f"✓ {message}"


def error_message(message: str, suggestion: str | None = None) -> str:
    """Build an error string, optionally with a hint for the caller."""
    text = f"Error: {message}"
    if suggestion:
        text += f"\n\nSuggestion: {suggestion}"
    return text
