"""Shared service-layer helper functions."""

from __future__ import annotations

import inspect
from datetime import UTC, datetime
from typing import Any


def now_iso() -> str:
    """Current UTC time as ISO 8601 with millisecond precision and a ``Z`` suffix."""
    return datetime.now(UTC).isoformat(timespec="milliseconds").replace("+00:00", "Z")


async def resolve(value: Any) -> Any:
    """Await *value* if it is awaitable, otherwise return it unchanged.

    Lets handlers and the graph client be written either sync or async.
    """
    if inspect.isawaitable(value):
        return await value
    return value
