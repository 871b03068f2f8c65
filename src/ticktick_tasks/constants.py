"""
TickTick API Constants.

Base URLs, defaults, and the integer enumerations used on the wire by
the TickTick Open API.
"""

from __future__ import annotations

from enum import IntEnum

# =============================================================================
# API Endpoints
# =============================================================================

TICKTICK_API_BASE_V1 = "https://api.ticktick.com/open/v1"

DEFAULT_TIMEOUT = 30.0

USER_AGENT = "ticktick-tasks/0.1.0"


# =============================================================================
# Task Enumerations
# =============================================================================


class TaskPriority(IntEnum):
    """Task priority as sent by the Open API."""

    NONE = 0
    LOW = 1
    MEDIUM = 3
    HIGH = 5

    @classmethod
    def label(cls, value: int | None) -> str:
        """Human-readable label for a raw priority value."""
        try:
            return cls(value or 0).name.lower()
        except ValueError:
            return str(value)


class TaskStatus(IntEnum):
    """Task completion status."""

    ACTIVE = 0
    COMPLETED = 2
