from datetime import UTC, datetime


def utcnow() -> datetime:
    """Current UTC time without tzinfo, matching what the DateTime columns store."""
    return datetime.now(UTC).replace(tzinfo=None)
