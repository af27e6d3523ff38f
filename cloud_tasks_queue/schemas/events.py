"""Notifications emitted by the queue adapter."""

from google.cloud import tasks_v2
from pydantic import BaseModel, ConfigDict


class TaskCreated(BaseModel):
    """A task was accepted by Cloud Tasks on ``queue``."""

    model_config = ConfigDict(arbitrary_types_allowed=True, frozen=True)

    queue: str
    task: tasks_v2.Task
