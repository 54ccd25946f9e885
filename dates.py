"""Calendar-day helpers shared by the store, streaks and reminders."""

import logging
from datetime import date, datetime, timedelta

log = logging.getLogger(__name__)

DAY_FORMAT = "%Y-%m-%d"
CLOCK_FORMAT = "%H:%M"


def day_id(d) -> str:
    """ISO date-only string, e.g. 2024-05-01."""
    if isinstance(d, datetime):
        d = d.date()
    return d.isoformat()


def parse_day(raw):
    """Return a date for a YYYY-MM-DD string, or None if it doesn't parse."""
    if isinstance(raw, date) and not isinstance(raw, datetime):
        return raw
    if not isinstance(raw, str):
        return None
    try:
        return datetime.strptime(raw.strip(), DAY_FORMAT).date()
    except ValueError:
        return None


def as_date(value) -> date:
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    parsed = parse_day(value)
    if parsed is None:
        raise ValueError(f"Not a calendar day: {value!r}")
    return parsed


def previous_day(day, n: int = 1) -> str:
    return day_id(as_date(day) - timedelta(days=n))


def clock_hhmm(now: datetime) -> str:
    return now.strftime(CLOCK_FORMAT)


def parse_reminder(raw):
    """Normalize a reminder to HH:MM; blank or invalid input gives None."""
    if raw is None:
        return None
    raw = str(raw).strip()
    if not raw:
        return None
    try:
        return datetime.strptime(raw, CLOCK_FORMAT).strftime(CLOCK_FORMAT)
    except ValueError:
        log.warning("Ignoring invalid reminder time %r", raw)
        return None
