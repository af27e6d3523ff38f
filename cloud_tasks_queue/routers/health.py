"""Health check endpoint reporting the queue's delivery mode."""

from typing import Annotated

from fastapi import APIRouter, Depends

from cloud_tasks_queue.dependencies import get_queue
from cloud_tasks_queue.schemas.health import HealthResponse
from cloud_tasks_queue.services.queue import CloudTasksQueue

router = APIRouter()

Queue = Annotated[CloudTasksQueue, Depends(get_queue)]


@router.get("/healthz", response_model=HealthResponse)
async def healthz(queue: Queue) -> HealthResponse:
    """Report which target type new tasks use and the default queue name."""
    settings = queue.settings
    return HealthResponse(
        status="ok",
        mode="app_engine" if settings.app_engine else "http",
        queue=settings.queue,
    )
