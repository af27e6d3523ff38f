"""Request targets a Cloud Task can be delivered through.

A task carries exactly one target. ``RequestTarget`` is a discriminated union
of the two variants, and each variant writes itself onto the matching oneof
field of a ``tasks_v2.Task``.
"""

from __future__ import annotations

from typing import Annotated, Literal

from google.cloud import tasks_v2
from pydantic import BaseModel, ConfigDict, Field


class PlatformRoutedTarget(BaseModel):
    """App Engine routed request: relative path, optional target service."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["app_engine"] = "app_engine"
    relative_uri: str
    body: bytes
    headers: dict[str, str] = Field(default_factory=dict)
    service: str | None = None

    def apply_to(self, task: tasks_v2.Task) -> tasks_v2.Task:
        request = tasks_v2.AppEngineHttpRequest(
            relative_uri=self.relative_uri,
            http_method=tasks_v2.HttpMethod.POST,
            body=self.body,
            headers=self.headers,
        )
        if self.service:
            request.app_engine_routing = tasks_v2.AppEngineRouting(service=self.service)

        task.app_engine_http_request = request
        return task


class DirectTarget(BaseModel):
    """HTTP request to an absolute URL, authenticated with an OIDC token."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["http"] = "http"
    url: str
    body: bytes
    headers: dict[str, str] = Field(default_factory=dict)
    service_account_email: str

    def apply_to(self, task: tasks_v2.Task) -> tasks_v2.Task:
        task.http_request = tasks_v2.HttpRequest(
            url=self.url,
            http_method=tasks_v2.HttpMethod.POST,
            body=self.body,
            headers=self.headers,
            oidc_token=tasks_v2.OidcToken(service_account_email=self.service_account_email),
        )
        return task


RequestTarget = Annotated[PlatformRoutedTarget | DirectTarget, Field(discriminator="kind")]
