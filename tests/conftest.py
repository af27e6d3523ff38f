"""Shared test fixtures: settings, in-memory Cloud Tasks API, queue and app client."""

from collections.abc import AsyncGenerator, Callable, Generator
from datetime import datetime

import pytest
from fastapi import FastAPI
from httpx import ASGITransport, AsyncClient

from cloud_tasks_queue.config import Settings, get_settings
from cloud_tasks_queue.dependencies import get_queue
from cloud_tasks_queue.main import create_app
from cloud_tasks_queue.services.cloud_tasks_api import InMemoryCloudTasksApi
from cloud_tasks_queue.services.queue import CloudTasksQueue
from tests.helpers import FROZEN_NOW, SERVICE_ACCOUNT, make_settings


@pytest.fixture
def settings() -> Settings:
    return make_settings()


@pytest.fixture
def app_engine_settings() -> Settings:
    return make_settings(app_engine=True, service_account_email=None, handler=None)


@pytest.fixture
def clock() -> Callable[[], datetime]:
    """A clock frozen at FROZEN_NOW."""
    return lambda: FROZEN_NOW


@pytest.fixture
def api() -> InMemoryCloudTasksApi:
    """Create a fresh in-memory Cloud Tasks API for test inspection."""
    return InMemoryCloudTasksApi()


@pytest.fixture
def queue(
    settings: Settings, api: InMemoryCloudTasksApi, clock: Callable[[], datetime]
) -> CloudTasksQueue:
    return CloudTasksQueue(settings, api, clock=clock)


@pytest.fixture
def app_engine_queue(
    app_engine_settings: Settings, api: InMemoryCloudTasksApi, clock: Callable[[], datetime]
) -> CloudTasksQueue:
    return CloudTasksQueue(app_engine_settings, api, clock=clock)


@pytest.fixture
def app(monkeypatch: pytest.MonkeyPatch, api: InMemoryCloudTasksApi) -> Generator[FastAPI, None, None]:
    """Create the app with the queue dependency overridden.

    The queue has no configured handler URL, so HTTP targets fall back to
    the host of the request being served.
    """
    monkeypatch.setenv("CLOUD_TASKS_SERVICE_ACCOUNT_EMAIL", SERVICE_ACCOUNT)
    get_settings.cache_clear()

    app = create_app()
    app_queue = CloudTasksQueue(make_settings(handler=None), api)
    app.dependency_overrides[get_queue] = lambda: app_queue
    yield app
    app.dependency_overrides.clear()
    get_settings.cache_clear()


@pytest.fixture
async def client(app: FastAPI) -> AsyncGenerator[AsyncClient, None]:
    """Yield an httpx AsyncClient bound to the app."""
    transport = ASGITransport(app=app, raise_app_exceptions=False)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
