"""Date and time utility functions."""
from datetime import datetime, timezone
from typing import Optional


def utc_now_iso(now: Optional[datetime] = None) -> str:
    """
    Format a moment as an ISO 8601 UTC string with millisecond precision.

    Args:
        now: Moment to format (default: current time). Naive values are
            taken to be UTC already.

    Returns:
        String such as "2026-02-01T09:30:00.000Z"
    """
    if now is None:
        now = datetime.now(timezone.utc)
    elif now.tzinfo is None:
        now = now.replace(tzinfo=timezone.utc)
    else:
        now = now.astimezone(timezone.utc)

    return now.isoformat(timespec="milliseconds").replace("+00:00", "Z")


def parse_iso_timestamp(value: str) -> datetime:
    """
    Parse an ISO 8601 timestamp, accepting a trailing 'Z'.

    Raises:
        ValueError: If the timestamp format is invalid
    """
    try:
        return datetime.fromisoformat(value.replace("Z", "+00:00"))
    except (ValueError, AttributeError) as e:
        raise ValueError(f"Invalid timestamp format: {value}") from e
