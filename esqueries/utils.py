import json
from datetime import date, datetime
from typing import Any, Dict, Iterable, Union

# strptime fallbacks tried after ISO 8601; slash dates are month first
_DATE_FORMATS = (
    '%m/%d/%Y',
    '%Y/%m/%d',
    '%d %b %Y',
    '%d %B %Y',
)


def parse_date(date_input: Union[str, date]) -> date:
    """
    Convert a date-like value to a calendar date.

    Args:
        date_input: A date/datetime object or a string such as '2024-01-31',
                    '2024-01-31T10:00:00Z', '01/31/2024' (month first) or '31 Jan 2024'.

    Returns:
        The calendar date. Datetimes keep the date they were written with,
        no timezone conversion is applied.

    Raises:
        ValueError: if the string matches none of the supported formats.
    """
    if isinstance(date_input, datetime):
        return date_input.date()
    if isinstance(date_input, date):
        return date_input

    text = str(date_input).strip()
    try:
        return datetime.fromisoformat(text).date()
    except ValueError:
        pass

    for fmt in _DATE_FORMATS:
        try:
            return datetime.strptime(text, fmt).date()
        except ValueError:
            continue

    raise ValueError(f"Could not parse date {date_input!r}")


def format_date(date_input: Union[str, date]) -> str:
    """Render a date as dd/mm/yyyy, the format the issue_date field is indexed with."""
    d = parse_date(date_input)
    return f"{d.day:02d}/{d.month:02d}/{d.year:04d}"


def format_hits(hits: Iterable[Dict[str, Any]]) -> str:
    """
    Serialize hit documents as compact JSON, one document per line.

    The input order is kept and an empty input gives an empty string.
    """
    return "\n".join(
        json.dumps(hit, separators=(',', ':'), ensure_ascii=False)
        for hit in hits
    )
