"""
Configuration for the Elasticsearch query server.

Everything is read once from the environment (a .env file is loaded when the
package is imported) and handed to the client explicitly.
"""
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

DEFAULT_PORT = 3001
DEFAULT_HOST = "0.0.0.0"
DEFAULT_MAX_RESULTS = 10


@dataclass(frozen=True)
class SearchConfig:
    """
    Connection settings for the search index.

    Attributes:
        endpoint (str): URL of the Elasticsearch cluster.
        api_key (str): API key used to authenticate. May be empty for open clusters.
        index (str): Name of the index every query is scoped to.
        max_results (int): Upper bound on the number of hits returned per query.
    """
    endpoint: str
    index: str
    api_key: str = ""
    max_results: int = DEFAULT_MAX_RESULTS

    def __post_init__(self):
        if self.max_results < 1:
            raise ValueError(f"max_results must be positive, got {self.max_results}")

    @classmethod
    def from_env(cls, index: Optional[str] = None) -> "SearchConfig":
        """
        Build the configuration from ELASTICSEARCH_ENDPOINT, ELASTICSEARCH_API_KEY,
        INDEX_NAME and ESQ_MAX_RESULTS.

        Args:
            index (str, optional): Overrides INDEX_NAME.

        Raises:
            ValueError: if a required variable is missing or ESQ_MAX_RESULTS is not a number.
        """
        endpoint = os.getenv('ELASTICSEARCH_ENDPOINT')
        index = index or os.getenv('INDEX_NAME')

        missing = []
        if not endpoint:
            missing.append('ELASTICSEARCH_ENDPOINT')
        if not index:
            missing.append('INDEX_NAME')
        if missing:
            raise ValueError(
                f"Missing required environment variables: {', '.join(missing)}. "
                "Please set these environment variables."
            )

        max_results = os.getenv('ESQ_MAX_RESULTS', str(DEFAULT_MAX_RESULTS))
        try:
            max_results = int(max_results)
        except ValueError:
            raise ValueError(f"ESQ_MAX_RESULTS must be an integer, got {max_results!r}")

        return cls(
            endpoint=endpoint,
            index=index,
            api_key=os.getenv('ELASTICSEARCH_API_KEY', ''),
            max_results=max_results,
        )


def get_port() -> int:
    return int(os.getenv('PORT') or DEFAULT_PORT)


def get_host() -> str:
    return os.getenv('HOST') or DEFAULT_HOST


def get_log_dir() -> Path:
    log_dir = os.getenv('ESQ_LOG_DIR')
    if log_dir:
        return Path(log_dir)
    return Path.home() / '.esqueries' / 'logs'
