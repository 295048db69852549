# src/api.py
from fastapi import APIRouter

from src.shifts.router import router as shifts_router
from src.workers.router import router as workers_router
from src.workplaces.router import router as workplaces_router

api_router = APIRouter()
api_router.include_router(workers_router, prefix="/workers", tags=["workers"])
api_router.include_router(workplaces_router, prefix="/workplaces", tags=["workplaces"])
api_router.include_router(shifts_router, prefix="/shifts", tags=["shifts"])
