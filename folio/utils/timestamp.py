"""Timestamp utilities."""

from datetime import datetime, timezone


def now() -> str:
    """
    Current UTC time as an ISO 8601 string with second precision.

    Examples:
        now()
        # "2025-11-13T18:45:40+00:00"
    """
    return datetime.now(timezone.utc).replace(microsecond=0).isoformat()


def format_timestamp(iso_timestamp: str) -> str:
    """
    Format ISO 8601 timestamp to readable format.

    Args:
        iso_timestamp: ISO 8601 formatted timestamp string

    Returns:
        Human-readable timestamp (e.g., "2025-11-13 18:45:40"), or the
        original string if it cannot be parsed
    """
    try:
        dt = datetime.fromisoformat(iso_timestamp)
        return dt.strftime("%Y-%m-%d %H:%M:%S")
    except (ValueError, TypeError):
        return iso_timestamp
