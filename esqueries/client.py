import logging
from typing import Any, Dict, List, Optional

from elasticsearch import AsyncElasticsearch

from .config import SearchConfig

logger = logging.getLogger(__name__)


class SearchClient:
    """
    Thin async client for the configured Elasticsearch index.

    One search request per call, errors from the cluster (connection,
    authentication, bad request) are raised to the caller unchanged.

    Example:
    ```python
    from esqueries import SearchClient, SearchConfig, semantic_query

    client = SearchClient(SearchConfig.from_env())
    hits = await client.execute(semantic_query("late payment"))
    await client.close()
    ```
    """
    def __init__(self, config: SearchConfig, es: Optional[AsyncElasticsearch] = None):
        """
        Args:
            config (SearchConfig): endpoint, credential, index and result cap.
            es (AsyncElasticsearch, optional): an existing client to use instead of building one from config.
        """
        self.config = config
        if es is None:
            es = AsyncElasticsearch(
                hosts=[config.endpoint],
                api_key=config.api_key or None,
            )
        self._es = es

    @property
    def index(self) -> str:
        return self.config.index

    async def execute(self, query: Dict[str, Any], index: Optional[str] = None) -> List[Dict[str, Any]]:
        """
        Run a query and return the source documents of the hits.

        Args:
            query: Query DSL dictionary
            index: Index to search, defaults to the configured one

        Returns:
            The _source of each hit, in the order returned by the engine.
        """
        index = index or self.config.index
        logger.debug("Searching %s with %s", index, query)
        response = await self._es.search(
            index=index,
            query=query,
            size=self.config.max_results,
        )
        hits = response["hits"]["hits"]
        logger.info("Query on %s returned %d hits", index, len(hits))
        return [hit.get("_source", {}) for hit in hits]

    async def close(self):
        await self._es.close()
