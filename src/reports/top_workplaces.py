# src/reports/top_workplaces.py
"""Print the most active workplaces by completed shifts.

Walks every page of ``/workplaces`` and ``/shifts`` by following
``links.next`` and ranks ACTIVE workplaces by the number of shifts that were
claimed and never cancelled.

Run with ``python -m src.reports.top_workplaces``.
"""
import asyncio
import logging
import sys
from collections import Counter
from typing import Sequence, TypeVar

import httpx
from pydantic import BaseModel

from src.logging_config import configure_logging
from src.shifts.schemas import ShiftRead
from src.workplaces.models import WorkplaceStatus
from src.workplaces.schemas import WorkplaceRead
from .config import report_settings
from .schemas import WorkplaceActivity

logger = logging.getLogger(__name__)

ItemT = TypeVar("ItemT", bound=BaseModel)


async def fetch_all(client: httpx.AsyncClient, path: str, item_schema: type[ItemT]) -> list[ItemT]:
    """Collect every item of a paginated listing. HTTP errors propagate."""
    items: list[ItemT] = []
    url: str | None = path
    while url:
        response = await client.get(url)
        response.raise_for_status()
        body = response.json()
        items.extend(item_schema.model_validate(item) for item in body["data"])
        url = body.get("links", {}).get("next")
    logger.debug("Fetched %d items from %s", len(items), path)
    return items


def rank_workplaces(
    workplaces: Sequence[WorkplaceRead],
    shifts: Sequence[ShiftRead],
    limit: int = 3,
) -> list[WorkplaceActivity]:
    completed = Counter(
        shift.workplace_id
        for shift in shifts
        if shift.worker_id is not None and shift.cancelled_at is None
    )
    activity = [
        WorkplaceActivity(name=workplace.name, shifts=completed[workplace.id])
        for workplace in workplaces
        if workplace.status == WorkplaceStatus.ACTIVE
    ]
    # sorted() is stable, so ties keep listing order
    activity = sorted(activity, key=lambda item: item.shifts, reverse=True)
    return activity[:limit]


def format_report(activity: Sequence[WorkplaceActivity]) -> str:
    lines = ["["]
    for index, item in enumerate(activity):
        comma = "," if index < len(activity) - 1 else ""
        lines.append(f'  {{ name: "{item.name}", shifts: {item.shifts} }}{comma}')
    lines.append("]")
    return "\n".join(lines)


async def get_top_workplaces(client: httpx.AsyncClient, limit: int | None = None) -> list[WorkplaceActivity]:
    workplaces = await fetch_all(client, "/workplaces", WorkplaceRead)
    shifts = await fetch_all(client, "/shifts", ShiftRead)
    return rank_workplaces(workplaces, shifts, limit or report_settings.TOP_WORKPLACES_LIMIT)


async def main() -> int:
    async with httpx.AsyncClient(
        base_url=report_settings.API_URL,
        timeout=report_settings.REQUEST_TIMEOUT_SECONDS,
    ) as client:
        try:
            top = await get_top_workplaces(client)
        except httpx.HTTPError:
            logger.exception("Could not fetch records from %s", report_settings.API_URL)
            return 1

    print(format_report(top))
    return 0


if __name__ == "__main__":
    configure_logging()
    sys.exit(asyncio.run(main()))
