"""Delay resolution for delayed dispatch."""

from __future__ import annotations

from datetime import UTC, datetime, timedelta

Delay = timedelta | datetime | int | float | None


def utcnow() -> datetime:
    return datetime.now(UTC)


def resolve_delay(delay: Delay, now: datetime | None = None) -> datetime:
    """Turn a relative or absolute delay into an aware UTC instant.

    ``timedelta`` and numeric seconds are added to ``now``; a ``datetime`` is
    returned as-is (naive values are read as UTC).
    """
    now = now or utcnow()

    if delay is None:
        return now
    if isinstance(delay, datetime):
        return delay if delay.tzinfo else delay.replace(tzinfo=UTC)
    if isinstance(delay, timedelta):
        return now + delay
    # bool is an int subclass but never a meaningful delay
    if isinstance(delay, (int, float)) and not isinstance(delay, bool):
        return now + timedelta(seconds=delay)

    msg = f"Unsupported delay type: {type(delay).__name__}"
    raise TypeError(msg)


def schedule_time(delay: Delay, now: datetime | None = None) -> datetime | None:
    """Return the instant to schedule at, or ``None`` to run immediately.

    Cloud Tasks timestamps are compared at whole-second precision; an instant
    that is not strictly later than ``now`` gets no schedule.
    """
    now = now or utcnow()
    available_at = resolve_delay(delay, now)

    if int(available_at.timestamp()) > int(now.timestamp()):
        return available_at.replace(microsecond=0)
    return None
