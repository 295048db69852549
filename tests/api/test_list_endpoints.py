# tests/api/test_list_endpoints.py
from datetime import datetime, timezone

import pytest
import pytest_asyncio
from httpx import AsyncClient
from sqlalchemy.exc import OperationalError

from src.shifts.dependencies import get_shift_collection
from src.workers.dependencies import get_worker_collection
from src.workplaces.dependencies import get_workplace_collection

START = datetime(2026, 3, 2, 8, 0, tzinfo=timezone.utc)
END = datetime(2026, 3, 2, 16, 0, tzinfo=timezone.utc)


def _workers(shard: int, count: int) -> list[dict]:
    return [{"id": shard * 100 + n, "name": f"Worker {shard}-{n}", "status": 0} for n in range(1, count + 1)]


def _shifts(shard: int, count: int) -> list[dict]:
    return [
        {
            "id": shard * 100 + n,
            "start_at": START,
            "end_at": END,
            "workplace_id": 1,
            "worker_id": None,
            "cancelled_at": None,
        }
        for n in range(1, count + 1)
    ]


@pytest_asyncio.fixture
async def use_collection(app):
    def _use(dependency, collection):
        app.dependency_overrides[dependency] = lambda: collection
        return collection

    return _use


@pytest.mark.asyncio
class TestListWorkers:
    async def test_first_page_links_to_second(self, async_client: AsyncClient, use_collection, make_collection):
        use_collection(get_worker_collection, make_collection({0: _workers(0, 25)}))

        response = await async_client.get("/workers")

        assert response.status_code == 200
        body = response.json()
        assert [item["id"] for item in body["data"]] == list(range(1, 11))
        assert body["links"] == {"next": "http://testserver/workers?page=2"}

    async def test_last_page_has_no_next_link(self, async_client: AsyncClient, use_collection, make_collection):
        use_collection(get_worker_collection, make_collection({0: _workers(0, 25)}))

        response = await async_client.get("/workers", params={"page": 3})

        body = response.json()
        assert len(body["data"]) == 5
        assert body["links"] == {}

    async def test_explicit_shard_is_carried_into_next_link(
            self, async_client: AsyncClient, use_collection, make_collection
    ):
        use_collection(get_worker_collection, make_collection({0: _workers(0, 25)}))

        response = await async_client.get("/workers", params={"page": 1, "shard": 0})

        assert response.json()["links"] == {"next": "http://testserver/workers?page=2&shard=0"}

    async def test_shard_beyond_max_is_empty(self, async_client: AsyncClient, use_collection, make_collection):
        use_collection(get_worker_collection, make_collection({0: _workers(0, 5)}))

        response = await async_client.get("/workers", params={"shard": 42})

        assert response.status_code == 200
        assert response.json() == {"data": [], "links": {}}

    @pytest.mark.parametrize("params", [{"page": 0}, {"page": "two"}, {"shard": -1}])
    async def test_malformed_page_request_is_rejected(
            self, params, async_client: AsyncClient, use_collection, make_collection
    ):
        use_collection(get_worker_collection, make_collection({}))

        response = await async_client.get("/workers", params=params)

        assert response.status_code == 422


@pytest.mark.asyncio
class TestListShifts:
    async def test_next_link_rolls_over_to_next_shard(self, async_client: AsyncClient, use_collection, make_collection):
        use_collection(get_shift_collection, make_collection({0: _shifts(0, 3), 1: _shifts(1, 2)}))

        response = await async_client.get("/shifts")

        body = response.json()
        assert len(body["data"]) == 3
        assert body["data"][0] == {
            "id": 1,
            "startAt": "2026-03-02T08:00:00Z",
            "endAt": "2026-03-02T16:00:00Z",
            "workplaceId": 1,
            "workerId": None,
            "cancelledAt": None,
        }
        assert body["links"] == {"next": "http://testserver/shifts?page=1&shard=1"}

    async def test_following_links_visits_every_shift(self, async_client: AsyncClient, use_collection, make_collection):
        use_collection(get_shift_collection, make_collection({0: _shifts(0, 14), 1: _shifts(1, 4)}))

        seen = []
        url = "/shifts"
        while url:
            body = (await async_client.get(url)).json()
            seen.extend(item["id"] for item in body["data"])
            url = body["links"].get("next")

        assert seen == list(range(1, 15)) + [101, 102, 103, 104]


@pytest.mark.asyncio
async def test_storage_failure_becomes_500(async_client: AsyncClient, use_collection, make_collection):
    collection = use_collection(get_workplace_collection, make_collection({0: 3}))

    async def failing_count(shard, *, offset=0, limit=None):
        raise OperationalError("SELECT count(*)", {}, Exception("connection lost"))

    collection.count = failing_count

    response = await async_client.get("/workplaces")

    assert response.status_code == 500
    assert response.json() == {"detail": "Storage error"}
