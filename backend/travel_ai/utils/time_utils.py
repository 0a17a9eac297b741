# backend/travel_ai/utils/time_utils.py

from datetime import datetime
import pytz


UTC = pytz.utc


def utc_now() -> datetime:
    return datetime.now(UTC)


def as_utc(value: datetime) -> datetime:
    """Naive values are taken to be UTC already (that is how the store writes them)."""
    if value.tzinfo is None:
        return UTC.localize(value)
    return value.astimezone(UTC)
