# src/pagination/collection.py
from typing import Generic, Optional, Protocol, Sequence, TypeVar, runtime_checkable

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

T_co = TypeVar("T_co", covariant=True)
ModelT = TypeVar("ModelT")


@runtime_checkable
class CountableCollection(Protocol[T_co]):
    """A shard-partitioned collection that can be counted and sliced."""

    async def count(self, shard: int, *, offset: int = 0, limit: Optional[int] = None) -> int: ...

    async def fetch(self, offset: int, limit: int, shard: int) -> Sequence[T_co]: ...


class ShardedTable(Generic[ModelT]):
    """CountableCollection over a mapped model that has a ``shard`` column.

    Rows are ordered by primary key so consecutive pages never overlap on a
    stable table.
    """

    def __init__(self, model: type[ModelT], db: AsyncSession):
        self.model = model
        self.db = db

    async def count(self, shard: int, *, offset: int = 0, limit: Optional[int] = None) -> int:
        window = (
            select(self.model.id)
            .where(self.model.shard == shard)
            .order_by(self.model.id)
            .offset(offset)
        )
        if limit is not None:
            window = window.limit(limit)
        total = await self.db.scalar(select(func.count()).select_from(window.subquery()))
        return total or 0

    async def fetch(self, offset: int, limit: int, shard: int) -> Sequence[ModelT]:
        result = await self.db.execute(
            select(self.model)
            .where(self.model.shard == shard)
            .order_by(self.model.id)
            .offset(offset)
            .limit(limit)
        )
        return result.scalars().all()
