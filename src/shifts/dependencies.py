# src/shifts/dependencies.py
from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from src.database import get_async_session
from src.pagination.collection import ShardedTable
from .models import Shift


async def get_shift_collection(db: AsyncSession = Depends(get_async_session)) -> ShardedTable[Shift]:
    return ShardedTable(Shift, db)
