"""Tracks the scheme and host of the request being served.

The queue falls back to this base URL for HTTP targets when no handler URL
is configured, so tasks call back into the host that dispatched them.
"""

from contextvars import ContextVar

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

_base_url: ContextVar[str | None] = ContextVar("request_base_url", default=None)


def current_base_url() -> str | None:
    """Return ``scheme://host[:port]`` of the active request, if any."""
    return _base_url.get()


class RequestContextMiddleware(BaseHTTPMiddleware):
    """Expose the request's scheme and host to code running inside it."""

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        token = _base_url.set(f"{request.url.scheme}://{request.url.netloc}")
        try:
            return await call_next(request)
        finally:
            _base_url.reset(token)
