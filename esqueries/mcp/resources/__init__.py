"""Resource handlers for the Elasticsearch MCP server."""

from .index_schema import get_index_schema
from .overview import get_service_overview

__all__ = [
    'get_index_schema',
    'get_service_overview'
]
