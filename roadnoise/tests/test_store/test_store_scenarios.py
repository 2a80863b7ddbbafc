"""End-to-end store scenarios against a mocked endpoint."""

from datetime import UTC, date

import httpx
import pytest
import respx

from roadnoise.ingest.entry_client import EntryClient
from roadnoise.store.entry_store import EntryStore

BASE_URL = "https://test-roadnoise.example.com/"


@pytest.fixture
def store() -> EntryStore:
    return EntryStore(EntryClient(api_key="k", base_url=BASE_URL), tz=UTC)


class TestScenarios:
    @pytest.mark.anyio
    @respx.mock
    async def test_refresh_then_submit(self, store: EntryStore, load_fixture):
        respx.get(BASE_URL).mock(
            return_value=httpx.Response(200, json=load_fixture("entries_history.json"))
        )
        respx.post(BASE_URL).mock(
            return_value=httpx.Response(200, json=load_fixture("entry_created.json"))
        )

        await store.refresh()
        assert store.grouped.days() == [date(2024, 1, 2), date(2024, 1, 1)]
        assert [e.id for e in store.grouped.get(date(2024, 1, 2))] == ["a", "b"]

        await store.submit(3)
        assert len(store.entries) == 4
        assert store.entries[0].id == "d"
        assert store.grouped.days()[0] == date(2024, 1, 3)

    @pytest.mark.anyio
    @respx.mock
    async def test_missing_condition_clears_store(self, store: EntryStore, load_fixture):
        route = respx.get(BASE_URL)
        route.mock(return_value=httpx.Response(200, json=load_fixture("entries_history.json")))
        await store.refresh()
        assert len(store.entries) == 3

        route.mock(
            return_value=httpx.Response(200, json=load_fixture("entries_missing_condition.json"))
        )
        await store.refresh()
        assert store.entries == ()
        assert len(store.grouped) == 0

    @pytest.mark.anyio
    @respx.mock
    async def test_rejected_submit_is_silent(self, store: EntryStore, load_fixture):
        respx.get(BASE_URL).mock(
            return_value=httpx.Response(200, json=load_fixture("entries_history.json"))
        )
        respx.post(BASE_URL).mock(return_value=httpx.Response(401))

        await store.refresh()
        before = store.snapshot
        assert await store.submit(1) is None
        assert store.snapshot is before
