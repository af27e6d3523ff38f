"""Queue configuration loaded from environment variables."""

from functools import lru_cache

from pydantic import field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

_MIN_DEADLINE = 15
_HTTP_MAX_DEADLINE = 30 * 60
_APP_ENGINE_MAX_DEADLINE = 24 * 60 * 60


class Settings(BaseSettings):
    """Cloud Tasks connection settings.

    Instances are frozen: the queue adapter reads them but never writes back.
    """

    model_config = SettingsConfigDict(
        env_prefix="CLOUD_TASKS_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        frozen=True,
    )

    app_name: str = "cloud-tasks-queue"
    log_level: str = "INFO"
    json_logs: bool = True

    project: str = ""
    location: str = "us-central1"
    queue: str = "default"
    connection: str = "cloudtasks"

    # Seconds Cloud Tasks waits for the handler before failing the attempt.
    # 0 or blank means unset. Limits follow the target type.
    dispatch_deadline: int | None = None

    app_engine: bool = False
    app_engine_service: str | None = None
    service_account_email: str | None = None

    # Base URL of the task handler; falls back to the current request's host.
    handler: str | None = None
    handler_path: str = "handle-task"

    @field_validator("dispatch_deadline", mode="before")
    @classmethod
    def _blank_deadline_is_unset(cls, value: object) -> object:
        if value in (0, "", "0", None):
            return None
        return value

    @model_validator(mode="after")
    def _check_dispatch_deadline(self) -> "Settings":
        if self.dispatch_deadline is None:
            return self
        upper = _APP_ENGINE_MAX_DEADLINE if self.app_engine else _HTTP_MAX_DEADLINE
        if not _MIN_DEADLINE <= self.dispatch_deadline <= upper:
            msg = f"dispatch_deadline must be between {_MIN_DEADLINE} and {upper} seconds"
            raise ValueError(msg)
        return self

    @model_validator(mode="after")
    def _require_identity_for_http_targets(self) -> "Settings":
        if not self.app_engine and not self.service_account_email:
            msg = "service_account_email is required when app_engine is disabled"
            raise ValueError(msg)
        return self


@lru_cache
def get_settings() -> Settings:
    """Return the process-wide settings, loaded once from the environment."""
    return Settings()
