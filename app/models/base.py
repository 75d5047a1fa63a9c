"""UTC timestamp helpers shared by the tables and services."""
from datetime import datetime, timezone

from sqlalchemy import DateTime

# Timestamp column type: aware UTC on PostgreSQL, stored as UTC wall time on SQLite
UtcDateTime = DateTime(timezone=True)


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


def as_utc(value: datetime | None) -> datetime | None:
    """SQLite returns naive values; treat them as UTC."""
    if value is None or value.tzinfo is not None:
        return value
    return value.replace(tzinfo=timezone.utc)
