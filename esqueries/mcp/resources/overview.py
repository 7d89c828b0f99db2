"""Overview resource for MCP server."""


def get_service_overview(index: str, max_results: int) -> str:
    """Get a short description of what the server searches."""
    return (
        f"Elasticsearch MCP serves documents from the '{index}' index. "
        f"Use get-semantic-search-results for free text questions and "
        f"get-search-by-date-results for an issue date range. "
        f"Each call returns at most {max_results} documents, one JSON object per line."
    )
