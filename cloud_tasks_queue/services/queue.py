"""Worker-queue adapter backed by Google Cloud Tasks.

Jobs are turned into Cloud Tasks that POST the JSON payload back to the
application's task handler. Cloud Tasks owns scheduling, retries and
delivery, so there is nothing to pop and no backlog to count here.
"""

from __future__ import annotations

import json
from collections.abc import Callable, Mapping
from datetime import datetime, timedelta
from typing import Any

import structlog
from google.cloud import tasks_v2
from pydantic import ValidationError

from cloud_tasks_queue.config import Settings
from cloud_tasks_queue.errors import HandlerUrlError, InvalidPayloadError
from cloud_tasks_queue.middleware.request_context import current_base_url
from cloud_tasks_queue.schemas.events import TaskCreated
from cloud_tasks_queue.schemas.job import CloudTasksJob
from cloud_tasks_queue.schemas.payload import JobPayload
from cloud_tasks_queue.services.cloud_tasks_api import CloudTasksApi, queue_path
from cloud_tasks_queue.services.enricher import enrich_payload
from cloud_tasks_queue.services.headers import HeaderFunc, HeaderProvider, as_header_provider
from cloud_tasks_queue.services.naming import short_task_id, task_name
from cloud_tasks_queue.services.payload import PayloadFactory, create_payload
from cloud_tasks_queue.services.request_target import build_request_target
from cloud_tasks_queue.services.schedule import Delay, schedule_time, utcnow

logger = structlog.get_logger()

TaskCreatedListener = Callable[[TaskCreated], None]


class CloudTasksQueue:
    """Push, delay, release and delete jobs as Cloud Tasks.

    The adapter keeps no per-task state: every call builds a fresh task,
    makes at most one remote call and returns.
    """

    def __init__(
        self,
        settings: Settings,
        api: CloudTasksApi,
        *,
        payload_factory: PayloadFactory | None = None,
        connection_name: str | None = None,
        clock: Callable[[], datetime] | None = None,
    ) -> None:
        self.settings = settings
        self.api = api
        self._payload_factory = payload_factory or create_payload
        self._connection_name = connection_name or settings.connection
        self._clock = clock or utcnow
        self._headers: HeaderProvider = as_header_provider(None)
        self._listeners: list[TaskCreatedListener] = []

    @property
    def connection_name(self) -> str:
        return self._connection_name

    def size(self, queue: str | None = None) -> int:
        """Always 0: Cloud Tasks does not expose a task count to the adapter."""
        return 0

    def pop(self, queue: str | None = None) -> None:
        """Always ``None``: tasks are delivered by HTTP callback, not pulled."""
        return None

    def push(self, job: Any, data: Any = "", queue: str | None = None) -> str:
        """Push a job for immediate execution and return its payload UUID."""
        payload = self._payload_factory(job, queue, data)
        return self.push_raw(payload, queue)

    def push_raw(
        self,
        payload: str | bytes,
        queue: str | None = None,
        options: Mapping[str, Any] | None = None,
    ) -> str:
        """Push an already serialized payload; ``options["delay"]`` defers it."""
        delay = (options or {}).get("delay") or 0
        return self._dispatch(queue, payload, delay)

    def later(self, delay: Delay, job: Any, data: Any = "", queue: str | None = None) -> str:
        """Push a job to run once ``delay`` has passed.

        ``delay`` is a ``timedelta``, an absolute ``datetime`` or a number of
        seconds.
        """
        payload = self._payload_factory(job, queue, data)
        return self._dispatch(queue, payload, delay)

    def release(self, job: CloudTasksJob, delay: Delay = 0) -> None:
        """Put a delivered job back on its queue after ``delay``.

        The raw body is pushed as-is, so the attempt counter it carries is
        neither reset nor incremented here.
        """
        logger.info(
            "task_released",
            queue=job.queue,
            attempts=job.attempts,
            delay=str(delay),
        )
        self.push_raw(job.raw_body, job.queue, {"delay": delay})

    def delete(self, job: CloudTasksJob) -> None:
        """Delete the job's task from Cloud Tasks."""
        name = job.task_name
        self.api.delete_task(name)
        logger.info("task_deleted", task_id=short_task_id(name))

    def get_handler(self) -> str:
        """Return the handler URL HTTP targets are delivered to.

        Uses the configured ``handler`` or, failing that, the scheme and host
        of the current request. The handler path is appended exactly once.

        Raises:
            HandlerUrlError: If neither source is available.
        """
        base = self.settings.handler or current_base_url()
        if not base:
            msg = "No task handler URL configured and no active request to derive it from"
            raise HandlerUrlError(msg)

        handler = base.rstrip("/")
        suffix = "/" + self.settings.handler_path.strip("/")
        if handler.endswith(suffix):
            return handler
        return handler + suffix

    def set_task_headers(
        self, headers: HeaderProvider | Mapping[str, str] | HeaderFunc | None
    ) -> None:
        """Use fixed headers, or a function of the payload, for new tasks."""
        self._headers = as_header_provider(headers)

    def on_task_created(self, listener: TaskCreatedListener) -> None:
        """Register a callback invoked after each task is created."""
        self._listeners.append(listener)

    def _dispatch(self, queue: str | None, payload: str | bytes, delay: Delay = 0) -> str:
        queue = queue or self.settings.queue
        decoded = self._decode(payload)
        settings = self.settings

        task = tasks_v2.Task(
            name=task_name(
                settings.project, settings.location, queue, decoded["displayName"]
            )
        )

        decoded = enrich_payload(
            decoded,
            queue_name=queue,
            task_name=task.name,
            connection_name=self.connection_name,
        )

        target = build_request_target(
            decoded, self._headers, settings, handler_url=self.get_handler
        )
        target.apply_to(task)

        # Cloud Tasks fails the attempt and retries per the queue's RetryConfig
        # when the handler has not answered within this deadline.
        if settings.dispatch_deadline:
            task.dispatch_deadline = timedelta(seconds=settings.dispatch_deadline)

        scheduled_at = schedule_time(delay, self._clock())
        if scheduled_at is not None:
            task.schedule_time = scheduled_at

        self.api.create_task(queue_path(settings.project, settings.location, queue), task)

        logger.info(
            "task_created",
            queue=queue,
            task_id=short_task_id(task.name),
            target=target.kind,
            scheduled_at=scheduled_at.isoformat() if scheduled_at else None,
        )

        event = TaskCreated(queue=queue, task=task)
        for listener in self._listeners:
            listener(event)

        return decoded["uuid"]

    @staticmethod
    def _decode(payload: str | bytes) -> dict[str, Any]:
        try:
            decoded = json.loads(payload)
        except json.JSONDecodeError as exc:
            msg = f"Job payload is not valid JSON: {exc}"
            raise InvalidPayloadError(msg) from exc

        if not isinstance(decoded, dict):
            msg = "Job payload must decode to a JSON object"
            raise InvalidPayloadError(msg)

        try:
            JobPayload.model_validate(decoded)
        except ValidationError as exc:
            msg = f"Job payload is missing required fields: {exc}"
            raise InvalidPayloadError(msg) from exc

        return decoded
