"""Tests for the Cloud Tasks API wrappers."""

from unittest.mock import MagicMock

import pytest
from google.api_core import exceptions as gcp_exceptions
from google.cloud import tasks_v2

from cloud_tasks_queue.services.cloud_tasks_api import (
    GoogleCloudTasksApi,
    InMemoryCloudTasksApi,
    queue_path,
)

QUEUE = "projects/my-project/locations/europe-west1/queues/emails"
TASK = f"{QUEUE}/tasks/01J0-SendEmail"


def test_queue_path() -> None:
    assert queue_path("my-project", "europe-west1", "emails") == QUEUE


def test_google_api_create_task_sends_request() -> None:
    client = MagicMock(spec=tasks_v2.CloudTasksClient)
    task = tasks_v2.Task(name=TASK)
    client.create_task.return_value = task

    result = GoogleCloudTasksApi(client).create_task(QUEUE, task)

    assert result is task
    (request,), _ = client.create_task.call_args
    assert request.parent == QUEUE
    assert request.task.name == TASK


def test_google_api_delete_task_sends_request() -> None:
    client = MagicMock(spec=tasks_v2.CloudTasksClient)

    GoogleCloudTasksApi(client).delete_task(TASK)

    (request,), _ = client.delete_task.call_args
    assert request.name == TASK


def test_google_api_does_not_swallow_not_found() -> None:
    """A task that is already gone is the caller's call to ignore, not ours."""
    client = MagicMock(spec=tasks_v2.CloudTasksClient)
    client.delete_task.side_effect = gcp_exceptions.NotFound("gone")

    with pytest.raises(gcp_exceptions.NotFound):
        GoogleCloudTasksApi(client).delete_task(TASK)


def test_in_memory_api_records_calls() -> None:
    api = InMemoryCloudTasksApi()
    task = tasks_v2.Task(name=TASK)

    assert api.create_task(QUEUE, task) is task
    api.delete_task("projects/p/locations/l/queues/q/tasks/unknown")

    assert api.created == [{"queue_path": QUEUE, "task": task}]
    assert api.tasks == [task]
    assert api.deleted == ["projects/p/locations/l/queues/q/tasks/unknown"]


def test_in_memory_api_starts_empty() -> None:
    api = InMemoryCloudTasksApi()

    assert api.created == []
    assert api.deleted == []
