"""FastAPI application factory with lifespan context manager."""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

import structlog
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from cloud_tasks_queue.config import get_settings
from cloud_tasks_queue.dependencies import init_queue
from cloud_tasks_queue.logging_config import configure_logging
from cloud_tasks_queue.middleware.request_context import RequestContextMiddleware
from cloud_tasks_queue.routers import health


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Configure logging and create the Cloud Tasks queue."""
    settings = get_settings()
    configure_logging(json_logs=settings.json_logs, log_level=settings.log_level)
    init_queue(settings)
    yield


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Return a JSON 500 response for any unhandled exception."""
    logger = structlog.get_logger()
    logger.exception("unhandled_exception", path=request.url.path, method=request.method)
    return JSONResponse(status_code=500, content={"detail": "Internal server error"})


def create_app() -> FastAPI:
    """Build the app; the queue itself is created on startup."""
    app = FastAPI(title=get_settings().app_name, lifespan=lifespan)
    app.add_middleware(RequestContextMiddleware)
    app.add_exception_handler(Exception, unhandled_exception_handler)
    app.include_router(health.router)
    return app
