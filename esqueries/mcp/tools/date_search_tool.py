"""Search-by-date tool handler for MCP server."""

import logging

from esqueries.search import date_range_query
from esqueries.utils import format_hits
from .result import ToolResult, MISSING_PARAMETERS, INVALID_PARAMETERS

logger = logging.getLogger(__name__)


def _is_blank(value) -> bool:
    return not isinstance(value, str) or not value.strip()


async def handle_date_search_tool(arguments: dict, client) -> ToolResult:
    """Handle the get-search-by-date-results tool execution."""
    date_from = arguments.get("from")
    date_to = arguments.get("to")

    if _is_blank(date_from) or _is_blank(date_to):
        return ToolResult.error("Both from and to parameters are required", MISSING_PARAMETERS)

    try:
        query = date_range_query(date_from, date_to)
    except ValueError as e:
        logger.warning("Rejected date range from=%r to=%r: %s", date_from, date_to, e)
        return ToolResult.error(f"Invalid date: {e}", INVALID_PARAMETERS)

    hits = await client.execute(query)
    return ToolResult(text=format_hits(hits))
