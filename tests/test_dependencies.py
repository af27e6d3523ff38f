"""Tests for the queue dependency initialization logic."""

from unittest.mock import patch

import pytest

import cloud_tasks_queue.dependencies as deps
from cloud_tasks_queue.dependencies import get_queue, init_queue
from cloud_tasks_queue.services.cloud_tasks_api import InMemoryCloudTasksApi
from tests.helpers import make_settings


@pytest.fixture(autouse=True)
def _reset_queue(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(deps, "_queue", None)


def test_get_queue_before_init_raises() -> None:
    with pytest.raises(RuntimeError, match="not initialized"):
        get_queue()


def test_init_queue_with_explicit_api() -> None:
    api = InMemoryCloudTasksApi()
    settings = make_settings()

    queue = init_queue(settings, api)

    assert get_queue() is queue
    assert queue.api is api
    assert queue.settings is settings


def test_init_queue_defaults_to_google_api() -> None:
    """Without an explicit API the production Cloud Tasks wrapper is used."""
    with patch("cloud_tasks_queue.services.cloud_tasks_api.GoogleCloudTasksApi") as mock_api:
        mock_api.return_value = mock_api

        queue = init_queue(make_settings())

        mock_api.assert_called_once_with()
        assert queue.api is mock_api
