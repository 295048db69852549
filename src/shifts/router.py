# src/shifts/router.py
from fastapi import APIRouter, Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession

from src.database import get_async_session
from src.exception import NotFoundException
from src.pagination.collection import ShardedTable
from src.pagination.config import pagination_settings
from src.pagination.dependencies import page_request_params
from src.pagination.schemas import PageRequest, PaginatedResponse
from src.pagination.service import paginate, resolve_page_address, to_paginated_response
from .dependencies import get_shift_collection
from .models import Shift
from .schemas import ShiftClaim, ShiftCreate, ShiftRead
from .service import cancel_shift, claim_shift, create_shift, get_shift_by_id

router = APIRouter()


@router.post("", response_model=ShiftRead, status_code=201)
async def create_new_shift(shift: ShiftCreate, db: AsyncSession = Depends(get_async_session)):
    return await create_shift(shift, db)


@router.get("", response_model=PaginatedResponse[ShiftRead])
async def list_shifts(
        request: Request,
        page_request: PageRequest = Depends(page_request_params),
        shifts: ShardedTable[Shift] = Depends(get_shift_collection),
):
    page = resolve_page_address(page_request.page, page_request.shard, size=pagination_settings.SHIFTS_PAGE_SIZE)
    result = await paginate(shifts, page)
    return to_paginated_response(result, ShiftRead, str(request.url))


@router.get("/{shift_id}", response_model=ShiftRead)
async def get_shift(shift_id: int, db: AsyncSession = Depends(get_async_session)):
    shift = await get_shift_by_id(shift_id, db)
    if not shift:
        raise NotFoundException("Shift not found")
    return shift


@router.post("/{shift_id}/claim", response_model=ShiftRead)
async def claim_existing_shift(shift_id: int, claim: ShiftClaim, db: AsyncSession = Depends(get_async_session)):
    shift = await claim_shift(shift_id, claim.worker_id, db)
    if not shift:
        raise NotFoundException("Shift not found")
    return shift


@router.post("/{shift_id}/cancel", response_model=ShiftRead)
async def cancel_existing_shift(shift_id: int, db: AsyncSession = Depends(get_async_session)):
    shift = await cancel_shift(shift_id, db)
    if not shift:
        raise NotFoundException("Shift not found")
    return shift
