# src/workers/router.py
from fastapi import APIRouter, Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession

from src.database import get_async_session
from src.exception import NotFoundException
from src.pagination.collection import ShardedTable
from src.pagination.config import pagination_settings
from src.pagination.dependencies import page_request_params
from src.pagination.schemas import PageRequest, PaginatedResponse
from src.pagination.service import paginate, resolve_page_address, to_paginated_response
from .dependencies import get_worker_collection
from .models import Worker
from .schemas import WorkerCreate, WorkerRead, WorkerUpdate
from .service import create_worker, get_worker_by_id, update_worker

router = APIRouter()


@router.post("", response_model=WorkerRead, status_code=201)
async def create_new_worker(worker: WorkerCreate, db: AsyncSession = Depends(get_async_session)):
    return await create_worker(worker, db)


@router.get("", response_model=PaginatedResponse[WorkerRead])
async def list_workers(
        request: Request,
        page_request: PageRequest = Depends(page_request_params),
        workers: ShardedTable[Worker] = Depends(get_worker_collection),
):
    page = resolve_page_address(page_request.page, page_request.shard, size=pagination_settings.WORKERS_PAGE_SIZE)
    result = await paginate(workers, page)
    return to_paginated_response(result, WorkerRead, str(request.url))


@router.get("/{worker_id}", response_model=WorkerRead)
async def get_worker(worker_id: int, db: AsyncSession = Depends(get_async_session)):
    worker = await get_worker_by_id(worker_id, db)
    if not worker:
        raise NotFoundException("Worker not found")
    return worker


@router.patch("/{worker_id}", response_model=WorkerRead)
async def update_existing_worker(worker_id: int, worker: WorkerUpdate, db: AsyncSession = Depends(get_async_session)):
    updated = await update_worker(worker_id, worker, db)
    if not updated:
        raise NotFoundException("Worker not found")
    return updated
