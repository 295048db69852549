# src/workplaces/schemas.py
from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from src.pagination.config import pagination_settings
from src.pagination.constants import DEFAULT_SHARD
from .models import WorkplaceStatus


class WorkplaceCreate(BaseModel):
    name: str = Field(min_length=1, max_length=255)
    status: WorkplaceStatus = WorkplaceStatus.ACTIVE
    shard: int = Field(DEFAULT_SHARD, ge=0, le=pagination_settings.MAX_SHARD)


class WorkplaceUpdate(BaseModel):
    name: str | None = Field(None, min_length=1, max_length=255)
    status: WorkplaceStatus | None = None


class WorkplaceRead(BaseModel):
    id: int
    name: str
    status: int

    model_config = ConfigDict(from_attributes=True, alias_generator=to_camel, populate_by_name=True)
