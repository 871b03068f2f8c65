"""
TickTick Client Exceptions.

All errors raised by the transport and client layers derive from
TickTickError. Schema validation failures are reported with
pydantic.ValidationError and are never wrapped.
"""

from __future__ import annotations

from typing import Any


class TickTickError(Exception):
    """Base exception for all TickTick client errors."""

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def __str__(self) -> str:
        if self.details:
            return f"{self.message} ({self.details})"
        return self.message


class TickTickConfigurationError(TickTickError):
    """Raised when the client is misconfigured or used before connecting."""


class TickTickAPIError(TickTickError):
    """Raised when the TickTick API answers with a non-success status."""

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
        response_body: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message, details)
        self.status_code = status_code
        self.response_body = response_body


class TickTickAuthenticationError(TickTickAPIError):
    """Raised when the access token is missing, invalid, or expired."""


class TickTickNotFoundError(TickTickAPIError):
    """Raised when the requested project or task does not exist."""
