"""
Timestamp normalization for raw task payloads.

The Open API returns ``completedTime`` as Unix epoch milliseconds on task
fetches, while the Task model expects an ISO 8601 string. This module
rewrites those values on the raw JSON before it is handed to the model.
Only ``completedTime`` and ``items`` are typed; everything else passes
through untouched.
"""

from __future__ import annotations

import math
from collections.abc import Mapping
from datetime import datetime, timedelta, timezone
from typing import Any, List, TypedDict, Union

EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)

Timestamp = Union[int, float, str, None]


class RawChecklistItem(TypedDict, total=False):
    """Raw checklist item; only the timestamp is typed."""

    completedTime: Timestamp


class RawTaskPayload(TypedDict, total=False):
    """Raw task response; only the fields that need normalizing are typed."""

    completedTime: Timestamp
    items: List[RawChecklistItem]


def epoch_millis_to_iso(value: int | float) -> str:
    """
    Convert Unix epoch milliseconds to a UTC ISO 8601 string.

    Fractional milliseconds are truncated. The result always carries
    millisecond precision and a ``Z`` suffix, e.g. ``1970-01-01T00:00:00.000Z``.
    """
    moment = EPOCH + timedelta(milliseconds=int(value))
    return moment.isoformat(timespec="milliseconds").replace("+00:00", "Z")


def _convert_timestamp(value: Any) -> Any:
    # bool is an int subclass but never a timestamp
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return value
    if isinstance(value, float) and not math.isfinite(value):
        return value
    try:
        return epoch_millis_to_iso(value)
    except OverflowError:
        # Outside the datetime range; left for the schema to reject
        return value


def _normalize_item(item: Any) -> Any:
    if not isinstance(item, Mapping):
        return item
    normalized = dict(item)
    if "completedTime" in normalized:
        normalized["completedTime"] = _convert_timestamp(normalized["completedTime"])
    return normalized


def normalize_timestamps(data: RawTaskPayload | Any) -> RawTaskPayload | Any:
    """
    Rewrite numeric ``completedTime`` values to ISO 8601 strings.

    Applies to the task root and to every element of ``items``. String and
    absent values are left as they are, and ``0`` is converted like any
    other number. ``None`` and non-mapping inputs are returned unchanged.

    Args:
        data: Parsed JSON response of a task fetch

    Returns:
        A normalized copy of the payload (the input is not mutated)
    """
    if not isinstance(data, Mapping):
        return data

    normalized = dict(data)

    if "completedTime" in normalized:
        normalized["completedTime"] = _convert_timestamp(normalized["completedTime"])

    items = normalized.get("items")
    if isinstance(items, list):
        normalized["items"] = [_normalize_item(item) for item in items]

    return normalized
