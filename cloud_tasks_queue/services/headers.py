"""Header providers for outgoing task requests.

Headers are either a fixed mapping or computed from the enriched payload at
dispatch time. Both are exposed through ``HeaderProvider.resolve``.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from typing import Any, Protocol, runtime_checkable

HeaderFunc = Callable[[dict[str, Any]], Mapping[str, str] | None]


@runtime_checkable
class HeaderProvider(Protocol):
    """Produces the HTTP headers sent with a task."""

    def resolve(self, payload: dict[str, Any]) -> dict[str, str]: ...


class StaticHeaders:
    """The same headers for every task."""

    def __init__(self, headers: Mapping[str, str] | None = None) -> None:
        self._headers = dict(headers or {})

    def resolve(self, payload: dict[str, Any]) -> dict[str, str]:
        return dict(self._headers)


class CallableHeaders:
    """Headers computed per payload by a user function."""

    def __init__(self, func: HeaderFunc) -> None:
        self._func = func

    def resolve(self, payload: dict[str, Any]) -> dict[str, str]:
        return dict(self._func(payload) or {})


def as_header_provider(
    headers: HeaderProvider | Mapping[str, str] | HeaderFunc | None,
) -> HeaderProvider:
    """Coerce a mapping, function, provider or ``None`` into a provider."""
    if headers is None:
        return StaticHeaders()
    if isinstance(headers, HeaderProvider):
        return headers
    if isinstance(headers, Mapping):
        return StaticHeaders(headers)
    if callable(headers):
        return CallableHeaders(headers)

    msg = f"Task headers must be a mapping or a callable, got {type(headers).__name__}"
    raise TypeError(msg)
