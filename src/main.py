# src/main.py
import logging

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from prometheus_client import Gauge
from prometheus_fastapi_instrumentator import Instrumentator
from sqlalchemy.exc import SQLAlchemyError
from starlette.middleware.base import BaseHTTPMiddleware

from src.api import api_router
from src.config import settings
from src.logging_config import configure_logging
from src.shifts import models as shift_models  # noqa
from src.workers import models as worker_models  # noqa
from src.workplaces import models as workplace_models  # noqa

configure_logging()
logger = logging.getLogger(__name__)

app = FastAPI(title=settings.PROJECT_NAME)

Instrumentator().instrument(app).expose(
    app,
    endpoint="/metrics",
    include_in_schema=False,
)

INPROGRESS = Gauge("inprogress_requests", "In-progress HTTP requests")


class InflightMiddleware(BaseHTTPMiddleware):
    async def dispatch(self, request, call_next):
        INPROGRESS.inc()
        try:
            return await call_next(request)
        finally:
            INPROGRESS.dec()


# Added first so it wraps every later middleware and router
app.add_middleware(InflightMiddleware)


@app.exception_handler(SQLAlchemyError)
async def storage_exception_handler(request: Request, exc: SQLAlchemyError):
    logger.exception("Storage failure on %s %s", request.method, request.url.path)
    return JSONResponse(status_code=500, content={"detail": "Storage error"})


app.include_router(api_router)

origins = settings.CORS_ORIGINS.split(",")

app.add_middleware(
    CORSMiddleware,
    allow_origins=origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
    expose_headers=["*"],
)


@app.get("/")
async def read_root():
    return {"msg": "Welcome to the Shift Records API!"}


@app.get("/health-check")
async def health_check():
    return {"status": "healthy"}
