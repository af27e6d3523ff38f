"""Cloud Tasks task naming.

Task names are ``{ulid}-{ShortClassName}``. The ULID keeps names unique per
dispatch and sorts them by creation time; the class name keeps them readable
in the console.
"""

from __future__ import annotations

import re

from google.cloud import tasks_v2
from ulid import ULID

# Backslash (App\Jobs\X) and dotted (app.jobs.X) namespace separators.
_NAMESPACE_SEPARATOR = re.compile(r"[\\.]")


def short_display_name(display_name: str) -> str:
    """Return the component after the last namespace separator."""
    return _NAMESPACE_SEPARATOR.split(display_name)[-1]


def task_name(project: str, location: str, queue_name: str, display_name: str) -> str:
    """Build a fully-qualified, unique task resource name."""
    task_id = f"{ULID()}-{short_display_name(display_name)}"
    return tasks_v2.CloudTasksClient.task_path(project, location, queue_name, task_id)


def short_task_id(name: str) -> str:
    """Return the trailing task id of a fully-qualified task name."""
    return name.rsplit("/", 1)[-1]
