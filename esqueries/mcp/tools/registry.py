"""The closed set of tools exposed by the server and their dispatch table."""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Awaitable, Callable, Dict, Optional

from .result import ToolResult
from .date_search_tool import handle_date_search_tool
from .semantic_search_tool import handle_semantic_search_tool

logger = logging.getLogger(__name__)


class UnknownToolError(ValueError):
    pass


class ToolName(str, Enum):
    SEARCH_BY_DATE = "get-search-by-date-results"
    SEMANTIC_SEARCH = "get-semantic-search-results"


@dataclass(frozen=True)
class ToolSpec:
    """Description and handler of one tool."""
    name: ToolName
    description: str
    parameters: Dict[str, str]  # parameter name -> description
    handler: Callable[[dict, object], Awaitable[ToolResult]]

    @property
    def input_schema(self) -> dict:
        # no "required" list and null allowed, absent, null and empty values all get
        # MISSING_PARAMETERS from the handler
        return {
            "type": "object",
            "properties": {
                param: {"type": ["string", "null"], "description": description}
                for param, description in self.parameters.items()
            },
        }


TOOLS: Dict[ToolName, ToolSpec] = {
    ToolName.SEARCH_BY_DATE: ToolSpec(
        name=ToolName.SEARCH_BY_DATE,
        description="Get the results of a search by date query based on a from and to date",
        parameters={
            "from": "The start date of the search (inclusive), e.g. 2024-01-01",
            "to": "The end date of the search (inclusive), e.g. 2024-01-31",
        },
        handler=handle_date_search_tool,
    ),
    ToolName.SEMANTIC_SEARCH: ToolSpec(
        name=ToolName.SEMANTIC_SEARCH,
        description="Get the results of a semantic search query based on a query string",
        parameters={
            "q": "The query string to search for",
        },
        handler=handle_semantic_search_tool,
    ),
}

_unregistered = set(ToolName) - set(TOOLS)
if _unregistered:
    raise RuntimeError(f"No handler registered for: {', '.join(t.value for t in _unregistered)}")


async def dispatch(name: str, arguments: Optional[dict], client) -> ToolResult:
    """
    Run a tool call against the search client.

    Args:
        name: Tool name as sent by the client
        arguments: Tool arguments, None is treated as no arguments
        client: Object with an async execute(query) method, normally a SearchClient

    Returns:
        ToolResult; missing or invalid parameters give an error result rather than an exception.

    Raises:
        UnknownToolError: for a name outside ToolName.
        Any error raised by the search client.
    """
    try:
        tool = TOOLS[ToolName(name)]
    except ValueError:
        raise UnknownToolError(f"Unknown tool: {name}")

    logger.info("%s called with: %s", tool.name.value, arguments)
    result = await tool.handler(arguments or {}, client)
    if result.is_error:
        logger.warning("%s returned %s: %s", tool.name.value, result.error_code, result.text)
    return result
