"""SearchClient tests against a mocked AsyncElasticsearch."""

import pytest

from esqueries.client import SearchClient
from esqueries.search import semantic_query


@pytest.mark.asyncio
async def test_execute_returns_sources_in_order(search_client, es_mock) -> None:
    hits = await search_client.execute(semantic_query("late"))
    assert hits == [{"invoice": 1}, {"invoice": 2}]
    es_mock.search.assert_awaited_once_with(
        index="invoices",
        query={"semantic": {"field": "semantic_field", "query": "late"}},
        size=5,
    )


@pytest.mark.asyncio
async def test_execute_index_override(search_client, es_mock) -> None:
    await search_client.execute({"match_all": {}}, index="archive")
    assert es_mock.search.await_args.kwargs["index"] == "archive"


@pytest.mark.asyncio
async def test_execute_no_hits(search_client, es_mock) -> None:
    es_mock.search.return_value = {"hits": {"hits": []}}
    assert await search_client.execute({"match_all": {}}) == []


@pytest.mark.asyncio
async def test_execute_single_attempt_on_failure(search_client, es_mock) -> None:
    es_mock.search.side_effect = ConnectionError("refused")
    with pytest.raises(ConnectionError):
        await search_client.execute({"match_all": {}})
    assert es_mock.search.await_count == 1


@pytest.mark.asyncio
async def test_close(search_client, es_mock) -> None:
    await search_client.close()
    es_mock.close.assert_awaited_once()


@pytest.mark.asyncio
async def test_builds_elasticsearch_client_from_config(config) -> None:
    client = SearchClient(config)
    assert client.index == "invoices"
    assert client._es is not None
    await client.close()
