"""URL and timestamp encoding helpers shared by the route operations."""

from datetime import datetime, timedelta, timezone
from urllib.parse import quote, urlencode


def format_rfc3339(value: datetime) -> str:
    """Format a datetime as RFC3339 with second precision.

    Naive datetimes are treated as UTC. A zero UTC offset is written as ``Z``.

    Example:
        >>> format_rfc3339(datetime(2023, 1, 1, tzinfo=timezone.utc))
        '2023-01-01T00:00:00Z'
    """
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)

    text = value.isoformat(timespec="seconds")
    if value.utcoffset() == timedelta(0):
        text = text[: -len("+00:00")] + "Z"
    return text


def encode_query_value(value: object) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, datetime):
        return format_rfc3339(value)
    return str(value)


def encode_query(values: dict[str, object]) -> str:
    """Form-encode query values, skipping unset and empty entries.

    Keys are sorted so the same filter always yields the same string.
    """
    pairs = [
        (key, encode_query_value(value))
        for key, value in sorted(values.items())
        if value is not None and value != ""
    ]
    return urlencode(pairs)


def escape_path_segment(value: str) -> str:
    """Percent-escape a value for use as a single path segment.

    Slashes are escaped. Sub-delimiters and colons that are legal inside a
    segment are kept, so IPv6 addresses stay readable.
    """
    return quote(value, safe="$&+:=@")


def with_query(path: str, query: str) -> str:
    if not query:
        return path
    return f"{path}?{query}"
