"""
Query construction for the Elasticsearch index.

Both builders are pure: they return a fresh query DSL dictionary and do no I/O.
"""
from typing import Any, Dict, Union
from datetime import date

from .utils import format_date

DATE_FIELD = "issue_date"
DATE_FORMAT = "dd/MM/yyyy"
SEMANTIC_FIELD = "semantic_field"


def date_range_query(
    date_from: Union[str, date],
    date_to: Union[str, date]
) -> Dict[str, Any]:
    """
    Build an inclusive range filter on the issue date.

    Args:
        date_from: Lower bound, any format understood by utils.parse_date
        date_to: Upper bound, any format understood by utils.parse_date

    Returns:
        Query of the form
        {"range": {"issue_date": {"gte": "dd/mm/yyyy", "lte": "dd/mm/yyyy", "format": "dd/MM/yyyy"}}}

    Bounds are not checked for ordering; a reversed range matches nothing.

    Raises:
        ValueError: if either date cannot be parsed.
    """
    return {
        "range": {
            DATE_FIELD: {
                "gte": format_date(date_from),
                "lte": format_date(date_to),
                "format": DATE_FORMAT,
            }
        }
    }


def semantic_query(q: str) -> Dict[str, Any]:
    """
    Build a semantic match against the semantic_text field.

    The query string is passed through untouched, tokenization happens in the engine.
    """
    return {
        "semantic": {
            "field": SEMANTIC_FIELD,
            "query": q,
        }
    }
