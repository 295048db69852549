# src/workers/service.py
from sqlalchemy.ext.asyncio import AsyncSession

from .models import Worker
from .schemas import WorkerCreate, WorkerUpdate


async def create_worker(worker: WorkerCreate, db: AsyncSession) -> Worker:
    db_worker = Worker(**worker.model_dump())
    db.add(db_worker)
    await db.commit()
    await db.refresh(db_worker)
    return db_worker


async def get_worker_by_id(worker_id: int, db: AsyncSession) -> Worker | None:
    return await db.get(Worker, worker_id)


async def update_worker(worker_id: int, worker: WorkerUpdate, db: AsyncSession) -> Worker | None:
    db_worker = await get_worker_by_id(worker_id, db)
    if not db_worker:
        return None

    # Only fields the client actually sent
    for key, value in worker.model_dump(exclude_unset=True).items():
        setattr(db_worker, key, value)

    await db.commit()
    await db.refresh(db_worker)
    return db_worker
