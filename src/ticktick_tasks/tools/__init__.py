"""
TickTick MCP Tools Package.

Input models and response formatting for the task tools exposed by the
MCP server.
"""

from ticktick_tasks.tools.inputs import (
    ResponseFormat,
    TaskCreateInput,
    TaskGetInput,
    TaskUpdateInput,
    TaskIdsInput,
)

__all__ = [
    "ResponseFormat",
    "TaskCreateInput",
    "TaskGetInput",
    "TaskUpdateInput",
    "TaskIdsInput",
]
