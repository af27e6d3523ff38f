"""Serializes a job into the JSON payload pushed onto the queue."""

from __future__ import annotations

import json
import uuid
from collections.abc import Callable
from typing import Any

PayloadFactory = Callable[[Any, str | None, Any], str]


def job_display_name(job: Any) -> str:
    """Name shown for a job: a string job is its own name, objects use their class."""
    if isinstance(job, str):
        return job
    name = getattr(job, "display_name", None)
    if name:
        return name
    cls = type(job)
    return f"{cls.__module__}.{cls.__qualname__}"


def create_payload(job: Any, queue: str | None = None, data: Any = "") -> str:
    """Return the JSON payload for ``job``.

    Objects may define ``tries`` and ``timeout`` attributes, and a
    ``to_payload_data()`` method whose result replaces ``data``.
    """
    display_name = job_display_name(job)

    if not isinstance(job, str) and hasattr(job, "to_payload_data"):
        data = job.to_payload_data()

    payload = {
        "uuid": str(uuid.uuid4()),
        "displayName": display_name,
        "job": display_name,
        "maxTries": getattr(job, "tries", None),
        "timeout": getattr(job, "timeout", None),
        "data": data,
    }
    return json.dumps(payload)
