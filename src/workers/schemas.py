# src/workers/schemas.py
from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from src.pagination.config import pagination_settings
from src.pagination.constants import DEFAULT_SHARD
from .models import WorkerStatus


class WorkerCreate(BaseModel):
    name: str = Field(min_length=1, max_length=255)
    status: WorkerStatus = WorkerStatus.ACTIVE
    shard: int = Field(DEFAULT_SHARD, ge=0, le=pagination_settings.MAX_SHARD)


class WorkerUpdate(BaseModel):
    name: str | None = Field(None, min_length=1, max_length=255)
    status: WorkerStatus | None = None


class WorkerRead(BaseModel):
    id: int
    name: str
    status: int

    model_config = ConfigDict(from_attributes=True, alias_generator=to_camel, populate_by_name=True)
