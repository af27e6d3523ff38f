"""Centralized FastAPI dependencies for use with Depends()."""

from cloud_tasks_queue.config import Settings
from cloud_tasks_queue.services.cloud_tasks_api import CloudTasksApi
from cloud_tasks_queue.services.queue import CloudTasksQueue

_queue: CloudTasksQueue | None = None


def init_queue(settings: Settings, api: CloudTasksApi | None = None) -> CloudTasksQueue:
    """Build the application queue, backed by Google Cloud Tasks by default.

    The GCP client is imported lazily so tests can pass an in-memory API
    without Application Default Credentials.
    """
    global _queue  # noqa: PLW0603

    if api is None:
        from cloud_tasks_queue.services.cloud_tasks_api import GoogleCloudTasksApi

        api = GoogleCloudTasksApi()

    _queue = CloudTasksQueue(settings, api)
    return _queue


def get_queue() -> CloudTasksQueue:
    """Return the application queue.

    Raises:
        RuntimeError: If ``init_queue()`` has not been called.
    """
    if _queue is None:
        msg = "Cloud Tasks queue not initialized. Call init_queue() first."
        raise RuntimeError(msg)
    return _queue


__all__ = [
    "get_queue",
    "init_queue",
]
