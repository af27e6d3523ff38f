"""Injects the ``internal`` bookkeeping block into a job payload."""

from __future__ import annotations

from typing import Any


def enrich_payload(
    payload: dict[str, Any],
    *,
    queue_name: str,
    task_name: str,
    connection_name: str,
) -> dict[str, Any]:
    """Return a copy of ``payload`` with a fresh ``internal`` block.

    The attempt counter survives redelivery: an existing non-null
    ``internal.attempts`` is carried over, otherwise it starts at zero.
    Queue, task name and connection always reflect the current dispatch.
    """
    previous = payload.get("internal") or {}

    return {
        **payload,
        "internal": {
            "attempts": previous.get("attempts") or 0,
            "queue": queue_name,
            "taskName": task_name,
            "connection": connection_name,
        },
    }
