"""Pydantic models for the JSON job payload carried by each Cloud Task."""

from pydantic import BaseModel, ConfigDict, Field


class InternalMetadata(BaseModel):
    """Bookkeeping block the job handler reads back on delivery.

    Only ``attempts`` is carried across redeliveries; the other fields are
    rewritten on every dispatch.
    """

    model_config = ConfigDict(extra="allow", populate_by_name=True)

    attempts: int | None = Field(default=None, ge=0)
    queue: str | None = None
    task_name: str | None = Field(default=None, alias="taskName")
    connection: str | None = None


class JobPayload(BaseModel):
    """Fields the adapter relies on; everything else passes through untouched."""

    model_config = ConfigDict(extra="allow", populate_by_name=True)

    uuid: str = Field(min_length=1)
    display_name: str = Field(alias="displayName", min_length=1)
    internal: InternalMetadata | None = None
