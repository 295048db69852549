# src/workplaces/dependencies.py
from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from src.database import get_async_session
from src.pagination.collection import ShardedTable
from .models import Workplace


async def get_workplace_collection(db: AsyncSession = Depends(get_async_session)) -> ShardedTable[Workplace]:
    return ShardedTable(Workplace, db)
