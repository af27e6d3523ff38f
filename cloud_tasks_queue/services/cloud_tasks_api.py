"""Cloud Tasks API abstraction with protocol-based swappable implementations.

Production code uses ``GoogleCloudTasksApi`` which wraps the synchronous
``google-cloud-tasks`` client. Tests use ``InMemoryCloudTasksApi`` which
captures created and deleted tasks for assertion without requiring a Cloud
Tasks emulator.
"""

from __future__ import annotations

from typing import Protocol

from google.cloud import tasks_v2


class CloudTasksApi(Protocol):
    """Protocol for the two remote calls the queue adapter makes."""

    def create_task(self, queue_path: str, task: tasks_v2.Task) -> tasks_v2.Task:
        """Create ``task`` on the queue at ``queue_path`` and return it."""
        ...

    def delete_task(self, task_name: str) -> None:
        """Delete the task with the given fully-qualified name."""
        ...


def queue_path(project: str, location: str, queue: str) -> str:
    """Return ``projects/{project}/locations/{location}/queues/{queue}``."""
    return tasks_v2.CloudTasksClient.queue_path(project, location, queue)


class GoogleCloudTasksApi:
    """Production implementation backed by Google Cloud Tasks.

    The client is created with Application Default Credentials unless one is
    passed in. API errors (``google.api_core.exceptions``) propagate; retry
    policy belongs to the queue's own configuration.
    """

    def __init__(self, client: tasks_v2.CloudTasksClient | None = None) -> None:
        self._client = client or tasks_v2.CloudTasksClient()

    def create_task(self, queue_path: str, task: tasks_v2.Task) -> tasks_v2.Task:
        """Create the task and return the server's copy of it."""
        return self._client.create_task(
            tasks_v2.CreateTaskRequest(parent=queue_path, task=task),
        )

    def delete_task(self, task_name: str) -> None:
        """Delete a task by name."""
        self._client.delete_task(tasks_v2.DeleteTaskRequest(name=task_name))


class InMemoryCloudTasksApi:
    """Test double that records created and deleted tasks for assertions."""

    def __init__(self) -> None:
        self.created: list[dict] = []
        self.deleted: list[str] = []

    def create_task(self, queue_path: str, task: tasks_v2.Task) -> tasks_v2.Task:
        """Append the task to the in-memory list and echo it back."""
        self.created.append({"queue_path": queue_path, "task": task})
        return task

    def delete_task(self, task_name: str) -> None:
        """Record the deletion; unknown names are not an error."""
        self.deleted.append(task_name)

    @property
    def tasks(self) -> list[tasks_v2.Task]:
        return [entry["task"] for entry in self.created]
