"""structlog setup for the queue adapter and its service wrapper.

``configure_logging`` routes structlog and stdlib records through one handler,
rendered as JSON in production or as console output during development.

The adapter logs one event per remote call (``task_created``,
``task_deleted``, ``task_released``) keyed by queue and short task id, so a
task can be followed from dispatch to the Cloud Tasks console. Records from
the Google client libraries (``google.auth``, ``google.api_core``) go through
the same pre-chain so they carry the same UTC timestamps and level fields, but
are held at WARNING or above because they log every RPC at INFO.
"""

from __future__ import annotations

import logging
import sys

import structlog

# Client library loggers that log every RPC at INFO.
_CHATTY_LOGGERS = ("google.auth", "google.api_core", "urllib3")


def configure_logging(*, json_logs: bool = True, log_level: str = "INFO") -> None:
    """Configure structlog and the stdlib root logger.

    Args:
        json_logs: Render JSON lines when *True*, console output otherwise.
        log_level: Root log level name (e.g. ``"INFO"``, ``"DEBUG"``).
    """
    shared_processors: list[structlog.types.Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso", utc=True),
        structlog.processors.StackInfoRenderer(),
    ]

    structlog.configure(
        processors=[
            *shared_processors,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    renderer: structlog.types.Processor = (
        structlog.processors.JSONRenderer() if json_logs else structlog.dev.ConsoleRenderer()
    )

    formatter = structlog.stdlib.ProcessorFormatter(
        foreign_pre_chain=shared_processors,
        processors=[
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
            renderer,
        ],
    )

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(formatter)

    root_logger = logging.getLogger()
    root_logger.handlers.clear()
    root_logger.addHandler(handler)
    root_logger.setLevel(log_level.upper())

    for name in _CHATTY_LOGGERS:
        logging.getLogger(name).setLevel(max(logging.WARNING, root_logger.level))
