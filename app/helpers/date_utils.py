from datetime import datetime, timedelta, timezone


def utc_now() -> datetime:
    """Naive UTC now, the convention for every stored timestamp."""
    return datetime.now(timezone.utc).replace(tzinfo=None)


def to_naive_utc(value: datetime) -> datetime:
    if value.tzinfo is None:
        return value
    return value.astimezone(timezone.utc).replace(tzinfo=None)


def tomorrow_at(hour: int, now: datetime = None) -> datetime:
    now = now or utc_now()
    return (now + timedelta(days=1)).replace(hour=hour, minute=0, second=0, microsecond=0)
