"""Semantic search tool handler for MCP server."""

from esqueries.search import semantic_query
from esqueries.utils import format_hits
from .result import ToolResult, MISSING_PARAMETERS


async def handle_semantic_search_tool(arguments: dict, client) -> ToolResult:
    """Handle the get-semantic-search-results tool execution."""
    q = arguments.get("q")

    if not isinstance(q, str) or not q.strip():
        return ToolResult.error("The query parameter is required", MISSING_PARAMETERS)

    hits = await client.execute(semantic_query(q))
    return ToolResult(text=format_hits(hits))
