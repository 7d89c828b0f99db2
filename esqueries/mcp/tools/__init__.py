"""Tool handlers for the Elasticsearch MCP server."""

from .result import ToolResult, MISSING_PARAMETERS, INVALID_PARAMETERS
from .date_search_tool import handle_date_search_tool
from .semantic_search_tool import handle_semantic_search_tool
from .registry import ToolName, ToolSpec, TOOLS, UnknownToolError, dispatch

__all__ = [
    'ToolResult',
    'MISSING_PARAMETERS',
    'INVALID_PARAMETERS',
    'handle_date_search_tool',
    'handle_semantic_search_tool',
    'ToolName',
    'ToolSpec',
    'TOOLS',
    'UnknownToolError',
    'dispatch'
]
