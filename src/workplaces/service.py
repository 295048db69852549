# src/workplaces/service.py
from sqlalchemy.ext.asyncio import AsyncSession

from .models import Workplace
from .schemas import WorkplaceCreate, WorkplaceUpdate


async def create_workplace(workplace: WorkplaceCreate, db: AsyncSession) -> Workplace:
    db_workplace = Workplace(**workplace.model_dump())
    db.add(db_workplace)
    await db.commit()
    await db.refresh(db_workplace)
    return db_workplace


async def get_workplace_by_id(workplace_id: int, db: AsyncSession) -> Workplace | None:
    return await db.get(Workplace, workplace_id)


async def update_workplace(workplace_id: int, workplace: WorkplaceUpdate, db: AsyncSession) -> Workplace | None:
    db_workplace = await get_workplace_by_id(workplace_id, db)
    if not db_workplace:
        return None

    for key, value in workplace.model_dump(exclude_unset=True).items():
        setattr(db_workplace, key, value)

    await db.commit()
    await db.refresh(db_workplace)
    return db_workplace
