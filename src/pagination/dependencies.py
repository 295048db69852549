# src/pagination/dependencies.py
from typing import Optional

from fastapi import Query

from .schemas import PageRequest


def page_request_params(
    page: Optional[int] = Query(None, ge=1),
    shard: Optional[int] = Query(None, ge=0),
) -> PageRequest:
    return PageRequest(page=page, shard=shard)
