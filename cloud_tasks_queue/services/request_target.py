"""Builds the request a Cloud Task delivers to the job handler."""

from __future__ import annotations

import json
from collections.abc import Callable
from typing import Any

from cloud_tasks_queue.config import Settings
from cloud_tasks_queue.schemas.targets import DirectTarget, PlatformRoutedTarget, RequestTarget
from cloud_tasks_queue.services.headers import HeaderProvider


def handler_relative_uri(settings: Settings) -> str:
    """Path of the task handler route, as App Engine routing expects it."""
    return "/" + settings.handler_path.strip("/")


def encode_body(payload: dict[str, Any]) -> bytes:
    return json.dumps(payload, separators=(",", ":")).encode("utf-8")


def build_request_target(
    payload: dict[str, Any],
    headers: HeaderProvider,
    settings: Settings,
    *,
    handler_url: Callable[[], str],
) -> RequestTarget:
    """Return the App Engine or HTTP target for ``payload``.

    ``settings.app_engine`` selects the variant. ``handler_url`` is only
    called for HTTP targets, since App Engine routing needs no host.
    """
    body = encode_body(payload)
    resolved_headers = headers.resolve(payload)

    if settings.app_engine:
        return PlatformRoutedTarget(
            relative_uri=handler_relative_uri(settings),
            body=body,
            headers=resolved_headers,
            service=settings.app_engine_service or None,
        )

    return DirectTarget(
        url=handler_url(),
        body=body,
        headers=resolved_headers,
        service_account_email=settings.service_account_email,
    )
