# src/shifts/schemas.py
from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field, model_validator
from pydantic.alias_generators import to_camel

from src.pagination.config import pagination_settings
from src.pagination.constants import DEFAULT_SHARD


class ShiftCreate(BaseModel):
    start_at: datetime
    end_at: datetime
    workplace_id: int
    shard: int = Field(DEFAULT_SHARD, ge=0, le=pagination_settings.MAX_SHARD)

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    @model_validator(mode="after")
    def check_time_window(self):
        if self.end_at <= self.start_at:
            raise ValueError("endAt must be after startAt")
        return self


class ShiftClaim(BaseModel):
    worker_id: int

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class ShiftRead(BaseModel):
    id: int
    start_at: datetime
    end_at: datetime
    workplace_id: int
    worker_id: int | None = None
    cancelled_at: datetime | None = None

    model_config = ConfigDict(from_attributes=True, alias_generator=to_camel, populate_by_name=True)
