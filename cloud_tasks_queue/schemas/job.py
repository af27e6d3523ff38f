"""Delivered-job view used when releasing or deleting a task."""

from __future__ import annotations

import json
from functools import cached_property
from typing import Any

from cloud_tasks_queue.errors import InvalidPayloadError


class CloudTasksJob:
    """A job as received by the task handler.

    Wraps the raw JSON body Cloud Tasks delivered. The body already carries
    the ``internal`` block written at dispatch time, so the task name and
    attempt counter are read from it.
    """

    def __init__(self, raw_body: str | bytes, queue: str | None = None) -> None:
        if isinstance(raw_body, bytes):
            raw_body = raw_body.decode("utf-8")
        self.raw_body = raw_body
        self._queue = queue

    @cached_property
    def payload(self) -> dict[str, Any]:
        try:
            payload = json.loads(self.raw_body)
        except json.JSONDecodeError as exc:
            msg = f"Job body is not valid JSON: {exc}"
            raise InvalidPayloadError(msg) from exc
        if not isinstance(payload, dict):
            msg = "Job body must decode to a JSON object"
            raise InvalidPayloadError(msg)
        return payload

    @property
    def internal(self) -> dict[str, Any]:
        return self.payload.get("internal") or {}

    @property
    def queue(self) -> str | None:
        return self._queue or self.internal.get("queue")

    @property
    def task_name(self) -> str:
        try:
            return self.internal["taskName"]
        except KeyError:
            msg = "Job payload has no internal.taskName; was it dispatched by this queue?"
            raise InvalidPayloadError(msg) from None

    @property
    def attempts(self) -> int:
        return int(self.internal.get("attempts") or 0)

    @property
    def uuid(self) -> str | None:
        return self.payload.get("uuid")

    @property
    def display_name(self) -> str | None:
        return self.payload.get("displayName")

    def __repr__(self) -> str:
        return f"CloudTasksJob(display_name={self.display_name!r}, queue={self.queue!r})"
