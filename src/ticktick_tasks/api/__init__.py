"""
TickTick Open API layer.

    - TaskOperations: validated task endpoints
    - TickTickTransport: default httpx request function
    - normalize_timestamps: completedTime normalization for fetched tasks
"""

from ticktick_tasks.api.normalization import (
    RawTaskPayload,
    epoch_millis_to_iso,
    normalize_timestamps,
)
from ticktick_tasks.api.tasks import TaskOperations, resolve_identifier
from ticktick_tasks.api.transport import RequestFunction, TickTickTransport

__all__ = [
    "RawTaskPayload",
    "RequestFunction",
    "TaskOperations",
    "TickTickTransport",
    "epoch_millis_to_iso",
    "normalize_timestamps",
    "resolve_identifier",
]
