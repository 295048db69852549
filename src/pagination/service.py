# src/pagination/service.py
import logging
from typing import Optional, Sequence, TypeVar

from pydantic import BaseModel
from starlette.datastructures import URL

from .collection import CountableCollection
from .config import pagination_settings
from .constants import DEFAULT_PAGE_NUMBER, DEFAULT_SHARD
from .schemas import PageAddress, PageLinks, PageQuery, PaginatedResponse, PaginatedResult

logger = logging.getLogger(__name__)

T = TypeVar("T")


def resolve_page_address(page: Optional[int], shard: Optional[int], *, size: int) -> PageAddress:
    """Fill in defaults for a list request. Values are not range checked here."""
    return PageAddress(
        number=DEFAULT_PAGE_NUMBER if page is None else page,
        size=size,
        shard=shard,
    )


def to_page_query(page: PageAddress) -> PageQuery:
    return PageQuery(
        offset=(page.number - 1) * page.size,
        limit=page.size,
        shard=page.shard_filter,
    )


async def _has_records(collection: CountableCollection, page: PageAddress) -> bool:
    query = to_page_query(page)
    count = await collection.count(query.shard, offset=query.offset, limit=query.limit)
    return count > 0


async def resolve_next_page(
    page: PageAddress,
    collection: CountableCollection,
    *,
    max_shard: Optional[int] = None,
) -> Optional[PageAddress]:
    """Find the page that follows ``page``, probing with counts only.

    The following page of the same shard wins when it holds records. Otherwise
    only the first page of the very next shard is probed: an empty shard ends
    the traversal even if a later shard has data.
    """
    if max_shard is None:
        max_shard = pagination_settings.MAX_SHARD

    candidate = PageAddress(number=page.number + 1, size=page.size, shard=page.shard)
    if await _has_records(collection, candidate):
        return candidate

    next_shard = (DEFAULT_SHARD if page.shard is None else page.shard) + 1
    if next_shard > max_shard:
        logger.debug("Shard %s exhausted and it is the last shard", next_shard - 1)
        return None

    rollover = PageAddress(number=1, size=page.size, shard=next_shard)
    if await _has_records(collection, rollover):
        logger.debug("Rolling pagination over to shard %s", next_shard)
        return rollover

    logger.debug("Shard %s is empty, stopping traversal", next_shard)
    return None


def build_next_link(next_page: Optional[PageAddress], base_url: str) -> Optional[str]:
    if next_page is None:
        return None

    url = URL(base_url).remove_query_params(["page", "shard"])
    if next_page.shard is None:
        url = url.include_query_params(page=next_page.number)
    else:
        url = url.include_query_params(page=next_page.number, shard=next_page.shard)
    return str(url)


async def paginate(
    collection: CountableCollection[T],
    page: PageAddress,
    *,
    max_shard: Optional[int] = None,
) -> PaginatedResult[T]:
    """Probe for the next page, then fetch the requested one.

    The probe and the fetch are separate reads, so ``next`` is only a hint
    when the collection changes in between.
    """
    next_page = await resolve_next_page(page, collection, max_shard=max_shard)
    query = to_page_query(page)
    items: Sequence[T] = await collection.fetch(query.offset, query.limit, query.shard)
    return PaginatedResult(items=items, next=next_page)


def to_paginated_response(
    result: PaginatedResult, item_schema: type[BaseModel], base_url: str
) -> PaginatedResponse:
    return PaginatedResponse[item_schema](
        data=[item_schema.model_validate(item) for item in result.items],
        links=PageLinks(next=build_next_link(result.next, base_url)),
    )
