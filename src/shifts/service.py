# src/shifts/service.py
from datetime import datetime, timezone

from fastapi import HTTPException
from sqlalchemy.ext.asyncio import AsyncSession

from src.workers.models import Worker
from src.workplaces.models import Workplace
from .models import Shift
from .schemas import ShiftCreate


async def create_shift(shift: ShiftCreate, db: AsyncSession) -> Shift:
    workplace = await db.get(Workplace, shift.workplace_id)
    if not workplace:
        raise HTTPException(status_code=400, detail=f"Invalid workplaceId: {shift.workplace_id}")

    db_shift = Shift(**shift.model_dump())
    db.add(db_shift)
    await db.commit()
    await db.refresh(db_shift)
    return db_shift


async def get_shift_by_id(shift_id: int, db: AsyncSession) -> Shift | None:
    return await db.get(Shift, shift_id)


async def claim_shift(shift_id: int, worker_id: int, db: AsyncSession) -> Shift | None:
    db_shift = await get_shift_by_id(shift_id, db)
    if not db_shift:
        return None

    worker = await db.get(Worker, worker_id)
    if not worker:
        raise HTTPException(status_code=400, detail=f"Invalid workerId: {worker_id}")

    db_shift.worker_id = worker_id
    await db.commit()
    await db.refresh(db_shift)
    return db_shift


async def cancel_shift(shift_id: int, db: AsyncSession) -> Shift | None:
    db_shift = await get_shift_by_id(shift_id, db)
    if not db_shift:
        return None

    db_shift.cancelled_at = datetime.now(timezone.utc)
    await db.commit()
    await db.refresh(db_shift)
    return db_shift
