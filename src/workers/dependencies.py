# src/workers/dependencies.py
from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from src.database import get_async_session
from src.pagination.collection import ShardedTable
from .models import Worker


async def get_worker_collection(db: AsyncSession = Depends(get_async_session)) -> ShardedTable[Worker]:
    return ShardedTable(Worker, db)
