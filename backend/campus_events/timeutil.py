"""UTC helpers shared by models and services."""
from datetime import datetime
from typing import Optional

import pytz


def utcnow() -> datetime:
    return datetime.now(pytz.utc)


def to_utc(value: Optional[datetime]) -> Optional[datetime]:
    """Normalize a date-time to UTC; naive values are taken to already be UTC."""
    if value is None:
        return None
    if value.tzinfo is None:
        return pytz.utc.localize(value)
    return value.astimezone(pytz.utc)
