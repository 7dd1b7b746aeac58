"""
Day windows and UTC normalisation.

Everything that touches the database goes through ``to_utc`` on the way in and
``as_utc`` on the way out, so Postgres (timestamptz) and SQLite (naive text)
compare and return the same instants.
"""
from __future__ import annotations
from datetime import date, datetime, time, timedelta, timezone, tzinfo
from typing import Optional


def to_utc(value: datetime, tz: Optional[tzinfo] = None) -> datetime:
    """Aware UTC datetime; a naive value is read as wall-clock time in ``tz`` (UTC if omitted)."""
    if value.tzinfo is None:
        value = value.replace(tzinfo=tz or timezone.utc)
    return value.astimezone(timezone.utc)


def as_utc(value: Optional[datetime]) -> Optional[datetime]:
    """Label a value coming back from storage. Naive values were stored as UTC."""
    if value is None:
        return None
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


def local_day_window(day: date | datetime, tz: Optional[tzinfo] = None) -> tuple[datetime, datetime]:
    """
    Half-open ``[start, end)`` UTC bounds of the calendar day containing ``day``.

    The zone is ``tz`` if given, else the tzinfo of an aware ``day``, else UTC.
    ``end`` is local midnight of the *next calendar date*, not ``start + 24h``,
    so 23h and 25h days around DST changes come out right.
    """
    if isinstance(day, datetime):
        zone = tz or day.tzinfo or timezone.utc
        if day.tzinfo is not None:
            day = day.astimezone(zone)
        local_date = day.date()
    else:
        zone = tz or timezone.utc
        local_date = day

    start = datetime.combine(local_date, time.min, tzinfo=zone)
    end = datetime.combine(local_date + timedelta(days=1), time.min, tzinfo=zone)
    return start.astimezone(timezone.utc), end.astimezone(timezone.utc)
