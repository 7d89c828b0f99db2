"""Pytest fixtures: a search client that records queries instead of calling Elasticsearch."""

from unittest.mock import AsyncMock

import pytest

from esqueries.client import SearchClient
from esqueries.config import SearchConfig


class FakeSearchClient:
    """Stands in for SearchClient; returns canned hits and keeps every query it receives."""

    def __init__(self, hits=None, error=None):
        self.hits = hits or []
        self.error = error
        self.queries = []

    async def execute(self, query, index=None):
        self.queries.append(query)
        if self.error is not None:
            raise self.error
        return list(self.hits)


@pytest.fixture
def config() -> SearchConfig:
    return SearchConfig(endpoint="http://localhost:9200", index="invoices", api_key="secret", max_results=5)


@pytest.fixture
def make_client():
    return FakeSearchClient


@pytest.fixture
def fake_client() -> FakeSearchClient:
    return FakeSearchClient(hits=[{"invoice": 1}, {"invoice": 2}])


@pytest.fixture
def es_mock():
    """AsyncElasticsearch replacement answering search() with two hits."""
    es = AsyncMock()
    es.search.return_value = {
        "hits": {
            "hits": [
                {"_index": "invoices", "_id": "a", "_source": {"invoice": 1}},
                {"_index": "invoices", "_id": "b", "_source": {"invoice": 2}},
            ]
        }
    }
    return es


@pytest.fixture
def search_client(config, es_mock) -> SearchClient:
    return SearchClient(config, es=es_mock)
