# src/pagination/schemas.py
from dataclasses import dataclass
from typing import Generic, Optional, Sequence, TypeVar

from pydantic import BaseModel, ConfigDict, model_serializer

from .constants import DEFAULT_SHARD

T = TypeVar("T")


class PageAddress(BaseModel):
    """A single page of one shard.

    ``shard=None`` means the client never named a shard. It is queried as
    ``DEFAULT_SHARD`` but stays unset so the next link can leave it out.
    """

    number: int
    size: int
    shard: Optional[int] = None

    model_config = ConfigDict(frozen=True)

    @property
    def shard_filter(self) -> int:
        return DEFAULT_SHARD if self.shard is None else self.shard


class PageQuery(BaseModel):
    offset: int
    limit: int
    shard: int

    model_config = ConfigDict(frozen=True)


class PageRequest(BaseModel):
    page: Optional[int] = None
    shard: Optional[int] = None


@dataclass(frozen=True)
class PaginatedResult(Generic[T]):
    items: Sequence[T]
    next: Optional[PageAddress] = None


class PageLinks(BaseModel):
    next: Optional[str] = None

    @model_serializer(mode="wrap")
    def omit_missing_links(self, handler):
        return {key: value for key, value in handler(self).items() if value is not None}


class PaginatedResponse(BaseModel, Generic[T]):
    data: list[T]
    links: PageLinks = PageLinks()
