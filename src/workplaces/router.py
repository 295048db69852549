# src/workplaces/router.py
from fastapi import APIRouter, Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession

from src.database import get_async_session
from src.exception import NotFoundException
from src.pagination.collection import ShardedTable
from src.pagination.config import pagination_settings
from src.pagination.dependencies import page_request_params
from src.pagination.schemas import PageRequest, PaginatedResponse
from src.pagination.service import paginate, resolve_page_address, to_paginated_response
from .dependencies import get_workplace_collection
from .models import Workplace
from .schemas import WorkplaceCreate, WorkplaceRead, WorkplaceUpdate
from .service import create_workplace, get_workplace_by_id, update_workplace

router = APIRouter()


@router.post("", response_model=WorkplaceRead, status_code=201)
async def create_new_workplace(workplace: WorkplaceCreate, db: AsyncSession = Depends(get_async_session)):
    return await create_workplace(workplace, db)


@router.get("", response_model=PaginatedResponse[WorkplaceRead])
async def list_workplaces(
        request: Request,
        page_request: PageRequest = Depends(page_request_params),
        workplaces: ShardedTable[Workplace] = Depends(get_workplace_collection),
):
    page = resolve_page_address(
        page_request.page, page_request.shard, size=pagination_settings.WORKPLACES_PAGE_SIZE
    )
    result = await paginate(workplaces, page)
    return to_paginated_response(result, WorkplaceRead, str(request.url))


@router.get("/{workplace_id}", response_model=WorkplaceRead)
async def get_workplace(workplace_id: int, db: AsyncSession = Depends(get_async_session)):
    workplace = await get_workplace_by_id(workplace_id, db)
    if not workplace:
        raise NotFoundException("Workplace not found")
    return workplace


@router.patch("/{workplace_id}", response_model=WorkplaceRead)
async def update_existing_workplace(
        workplace_id: int,
        workplace: WorkplaceUpdate,
        db: AsyncSession = Depends(get_async_session),
):
    updated = await update_workplace(workplace_id, workplace, db)
    if not updated:
        raise NotFoundException("Workplace not found")
    return updated
