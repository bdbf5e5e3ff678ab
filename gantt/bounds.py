from dataclasses import dataclass
from datetime import date, datetime, timedelta, timezone

LOOKBACK_DAYS = 14
LOOKAHEAD_DAYS = 90
START_PADDING_DAYS = 7
END_PADDING_DAYS = 14


def midnight(d) -> date:
    """Truncate a date/datetime to its calendar day. Aware datetimes are read in UTC."""
    if isinstance(d, datetime):
        if d.tzinfo is not None:
            d = d.astimezone(timezone.utc)
        return d.date()
    return d


def days_between(a, b) -> int:
    return (midnight(b) - midnight(a)).days


def add_days(d, days: int) -> date:
    return midnight(d) + timedelta(days=days)


@dataclass(frozen=True)
class Bounds:
    start: date
    end: date
    today: date


def compute_bounds(items, today=None) -> Bounds:
    today = midnight(today or date.today())
    earliest = today - timedelta(days=LOOKBACK_DAYS)
    latest = today + timedelta(days=LOOKAHEAD_DAYS)

    for item in items:
        if item.start_date and item.start_date < earliest:
            earliest = item.start_date
        if item.date < earliest:
            earliest = item.date
        if item.date > latest:
            latest = item.date

    return Bounds(
        start=earliest - timedelta(days=START_PADDING_DAYS),
        end=latest + timedelta(days=END_PADDING_DAYS),
        today=today,
    )
