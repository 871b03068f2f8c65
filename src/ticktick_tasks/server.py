#!/usr/bin/env python3
"""
TickTick Tasks MCP Server.

This server exposes the TickTick Open API task endpoints as MCP tools.

Features:
    - Get a task by project and task ID
    - Create, update, complete, and delete tasks

Environment Variables Required:
    TICKTICK_ACCESS_TOKEN

Optional:
    TICKTICK_API_BASE_URL, TICKTICK_TIMEOUT, TICKTICK_LOG_LEVEL
"""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import Any, AsyncIterator

from mcp.server.fastmcp import FastMCP, Context

from ticktick_tasks.client import TickTickClient
from ticktick_tasks.settings import get_settings
from ticktick_tasks.tools.inputs import (
    ResponseFormat,
    TaskCreateInput,
    TaskGetInput,
    TaskUpdateInput,
    TaskIdsInput,
)
from ticktick_tasks.tools.formatting import (
    format_task,
    success_message,
    error_message,
)

# Configure logging
logging.basicConfig(
    level=get_settings().log_level,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


# =============================================================================
# Lifespan Management
# =============================================================================


@asynccontextmanager
async def lifespan(mcp: FastMCP) -> AsyncIterator[dict[str, Any]]:
    """
    Manage the TickTick client lifecycle.

    Connects the client on startup and disconnects it on shutdown.
    """
    logger.info("Initializing TickTick Tasks MCP Server...")

    client = TickTickClient.from_settings()
    await client.connect()
    try:
        yield {"client": client}
    finally:
        await client.disconnect()
        logger.info("TickTick client disconnected")


# Initialize FastMCP server
mcp = FastMCP(
    "ticktick_tasks",
    lifespan=lifespan,
)


def get_client(ctx: Context) -> TickTickClient:
    """Get the TickTick client from context."""
    return ctx.request_context.lifespan_context["client"]


# =============================================================================
# Error Handling
# =============================================================================


def handle_error(e: Exception, operation: str) -> str:
    """Handle exceptions and return user-friendly error messages."""
    logger.exception("Error in %s: %s", operation, e)

    error_type = type(e).__name__

    if "Authentication" in error_type:
        return error_message(
            "Authentication failed. Please check your access token.",
            "Ensure TICKTICK_ACCESS_TOKEN is set to a valid OAuth2 token.",
        )
    elif "NotFound" in error_type:
        return error_message(
            f"Resource not found: {e}",
            "Verify the project and task IDs are correct.",
        )
    elif "Validation" in error_type:
        return error_message(f"Invalid input: {e}")
    elif "Configuration" in error_type:
        return error_message(
            f"Configuration error: {e}",
            "Check your environment variables and settings.",
        )
    else:
        return error_message(f"Unexpected error: {e}")


# =============================================================================
# Task Tools
# =============================================================================


@mcp.tool(
    name="ticktick_get_task",
    annotations={
        "title": "Get Task",
        "readOnlyHint": True,
        "destructiveHint": False,
        "idempotentHint": True,
        "openWorldHint": True,
    },
)
async def ticktick_get_task(
    params: TaskGetInput,
    ctx: Context,
    response_format: ResponseFormat = ResponseFormat.MARKDOWN,
) -> str:
    """
    Get a task by its project ID and task ID.

    Args:
        params: Query parameters including:
            - projectId (str): Project identifier (required)
            - taskId (str): Task identifier (required)
        response_format: 'markdown' or 'json'

    Returns:
        Formatted task details or error message.
    """
    try:
        client = get_client(ctx)
        task = await client.get_task_by_ids(params)
        return format_task(task, as_json=response_format == ResponseFormat.JSON)
    except Exception as e:
        return handle_error(e, "get_task")


@mcp.tool(
    name="ticktick_create_task",
    annotations={
        "title": "Create Task",
        "readOnlyHint": False,
        "destructiveHint": False,
        "idempotentHint": False,
        "openWorldHint": True,
    },
)
async def ticktick_create_task(
    params: TaskCreateInput,
    ctx: Context,
    response_format: ResponseFormat = ResponseFormat.MARKDOWN,
) -> str:
    """
    Create a new task in TickTick.

    Args:
        params: Task creation parameters including:
            - title (str): Task title (required)
            - projectId (str): Project to create in (required)
            - content, desc (str): Task notes
            - startDate, dueDate (str): "yyyy-MM-dd'T'HH:mm:ssZ"
            - priority (int): 0, 1, 3 or 5
            - reminders (list): iCalendar triggers
            - repeatFlag (str): RRULE for recurring tasks
            - items (list): Checklist items
        response_format: 'markdown' or 'json'

    Returns:
        Formatted task details on success, or error message on failure.
    """
    try:
        client = get_client(ctx)
        task = await client.create_task(params)
        return format_task(task, as_json=response_format == ResponseFormat.JSON)
    except Exception as e:
        return handle_error(e, "create_task")


@mcp.tool(
    name="ticktick_update_task",
    annotations={
        "title": "Update Task",
        "readOnlyHint": False,
        "destructiveHint": False,
        "idempotentHint": True,
        "openWorldHint": True,
    },
)
async def ticktick_update_task(
    params: TaskUpdateInput,
    ctx: Context,
    response_format: ResponseFormat = ResponseFormat.MARKDOWN,
) -> str:
    """
    Update an existing task.

    Only the fields provided are sent; everything else is left as it is.

    Args:
        params: Update parameters including:
            - taskId / id (str): Task identifier (at least one required)
            - projectId (str): Project the task belongs to (required)
            - any task field to change
        response_format: 'markdown' or 'json'

    Returns:
        Formatted updated task or error message.
    """
    try:
        client = get_client(ctx)
        task = await client.update_task(params)
        return format_task(task, as_json=response_format == ResponseFormat.JSON)
    except Exception as e:
        return handle_error(e, "update_task")


@mcp.tool(
    name="ticktick_complete_task",
    annotations={
        "title": "Complete Task",
        "readOnlyHint": False,
        "destructiveHint": False,
        "idempotentHint": True,
        "openWorldHint": True,
    },
)
async def ticktick_complete_task(params: TaskIdsInput, ctx: Context) -> str:
    """
    Mark a task as completed.

    Args:
        params: taskId and projectId (both required)

    Returns:
        Success or error message.
    """
    try:
        client = get_client(ctx)
        await client.complete_task(params)
        return success_message(f"Task `{params.task_id}` marked as complete.")
    except Exception as e:
        return handle_error(e, "complete_task")


@mcp.tool(
    name="ticktick_delete_task",
    annotations={
        "title": "Delete Task",
        "readOnlyHint": False,
        "destructiveHint": True,
        "idempotentHint": True,
        "openWorldHint": True,
    },
)
async def ticktick_delete_task(params: TaskIdsInput, ctx: Context) -> str:
    """
    Delete a task.

    Args:
        params: taskId and projectId (both required)

    Returns:
        Success or error message.
    """
    try:
        client = get_client(ctx)
        await client.delete_task(params)
        return success_message(f"Task `{params.task_id}` deleted.")
    except Exception as e:
        return handle_error(e, "delete_task")


# =============================================================================
# Main Entry Point
# =============================================================================


def main():
    """Main entry point for the TickTick Tasks MCP server."""
    mcp.run()


if __name__ == "__main__":
    main()
