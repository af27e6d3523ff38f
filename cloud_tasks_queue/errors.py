"""Exceptions raised by the queue adapter before any remote call is made.

Errors from the Cloud Tasks API itself (``google.api_core.exceptions``) are
not wrapped and reach the caller unchanged.
"""


class CloudTasksQueueError(Exception):
    """Base class for local queue adapter failures."""


class InvalidPayloadError(CloudTasksQueueError, ValueError):
    """The job payload cannot be decoded or lacks a required field."""


class HandlerUrlError(CloudTasksQueueError):
    """No handler URL is configured and there is no request to derive one from."""
