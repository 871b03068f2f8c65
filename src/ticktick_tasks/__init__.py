"""
TickTick Tasks - typed async client for TickTick's Open API task endpoints.

Architecture:
    MCP Tools Layer (server)
         │
         ▼
    TickTickClient (lifecycle)
         │
         ▼
    TaskOperations (validation, URLs, normalization)
         │
         ▼
    TickTickTransport (httpx)
"""

__version__ = "0.1.0"
__author__ = "TickTick Tasks Contributors"

from ticktick_tasks.exceptions import (
    TickTickError,
    TickTickConfigurationError,
    TickTickAPIError,
    TickTickAuthenticationError,
    TickTickNotFoundError,
)

__all__ = [
    "__version__",
    "TickTickError",
    "TickTickConfigurationError",
    "TickTickAPIError",
    "TickTickAuthenticationError",
    "TickTickNotFoundError",
]
