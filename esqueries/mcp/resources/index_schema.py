"""Index schema resource for MCP server."""

import json

from esqueries.search import DATE_FIELD, DATE_FORMAT, SEMANTIC_FIELD


def get_index_schema(index: str) -> str:
    """Describe the fields the tools query and the query shapes they send."""
    schema = {
        "description": f"Fields of the '{index}' index used by the search tools",
        "fields": {
            DATE_FIELD: {
                "type": "date",
                "format": DATE_FORMAT,
                "description": "Issue date of the document, used by get-search-by-date-results",
                "example_query": {"range": {DATE_FIELD: {"gte": "01/01/2024", "lte": "31/01/2024", "format": DATE_FORMAT}}}
            },
            SEMANTIC_FIELD: {
                "type": "semantic_text",
                "description": "Embedded document text, used by get-semantic-search-results",
                "example_query": {"semantic": {"field": SEMANTIC_FIELD, "query": "unpaid invoices"}}
            }
        },
        "accepted_date_inputs": [
            "2024-01-31",
            "2024-01-31T10:00:00Z",
            "01/31/2024 (month first)",
            "2024/01/31",
            "31 Jan 2024"
        ]
    }
    return json.dumps(schema, indent=2)
