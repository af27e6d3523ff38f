"""Builders shared by the test modules."""

import json
from datetime import UTC, datetime

from cloud_tasks_queue.config import Settings

FROZEN_NOW = datetime(2026, 3, 1, 12, 0, 0, tzinfo=UTC)
SERVICE_ACCOUNT = "tasks@my-project.iam.gserviceaccount.com"


def make_settings(**overrides) -> Settings:
    """Build settings for an HTTP-target queue, ignoring any local .env file."""
    values = {
        "project": "my-project",
        "location": "europe-west1",
        "queue": "default",
        "service_account_email": SERVICE_ACCOUNT,
        "handler": "https://example.com",
        "handler_path": "handle-task",
    }
    values.update(overrides)
    return Settings(_env_file=None, **values)


def make_payload(
    display_name: str = "App\\Jobs\\SendEmail",
    uuid: str = "abc-123",
    **extra,
) -> str:
    """Serialize a job payload the way the upstream payload factory would."""
    return json.dumps({"uuid": uuid, "displayName": display_name, "data": {}, **extra})
