# clinicgrid/util/tz.py
from __future__ import annotations

import datetime as dt
import re
from typing import Any, Optional
from zoneinfo import ZoneInfo

_OFFSET_RE = re.compile(r"^([+-])(\d{2}):?(\d{2})$")
_COMPACT_UTC_RE = re.compile(r"^(\d{8})T(\d{6})Z$")  # e.g. 20251217T083000Z


def normalize_tz_name(name: Optional[str]) -> str:
    """Normalize a timezone identifier.

    Supported forms:
      - None/"" -> "local"
      - "local" / "system" -> "local" (resolve to the machine's local timezone)
      - "UTC" / "Z" / "GMT" -> "UTC"
      - IANA names, e.g. "Asia/Jerusalem"
      - Fixed offsets: "+02:00", "+0200", "-05:00"
    """
    if name is None:
        return "local"
    s = str(name).strip()
    if not s:
        return "local"

    low = s.lower()
    if low in {"local", "system", "native"}:
        return "local"
    if low in {"utc", "z", "gmt", "utc0", "utc+0"}:
        return "UTC"

    return s


def resolve_tz(name: Optional[str]) -> dt.tzinfo:
    """Resolve a timezone name into a tzinfo.

    Raises ValueError for invalid timezone identifiers.
    """
    tz_name = normalize_tz_name(name)

    if tz_name == "UTC":
        return dt.timezone.utc

    if tz_name == "local":
        tz = dt.datetime.now().astimezone().tzinfo
        return tz or dt.timezone.utc

    m = _OFFSET_RE.match(tz_name)
    if m:
        sign_s, hh_s, mm_s = m.groups()
        hh = int(hh_s)
        mm = int(mm_s)
        if hh > 23 or mm > 59:
            raise ValueError(f"Invalid timezone offset: {tz_name!r}")
        sign = 1 if sign_s == "+" else -1
        off_min = sign * (hh * 60 + mm)
        return dt.timezone(dt.timedelta(minutes=off_min))

    try:
        return ZoneInfo(tz_name)
    except Exception as ex:
        raise ValueError(f"Invalid timezone identifier: {tz_name!r}") from ex


def today_date(tz: dt.tzinfo) -> dt.date:
    return dt.datetime.now(tz=tz).date()


def parse_timestamp(value: Any) -> Optional[dt.datetime]:
    """Parse a host timestamp into an aware datetime, or None.

    Accepts aware/naive datetimes, ISO-8601 strings (with "Z" or an offset),
    compact UTC strings (20251217T083000Z) and epoch milliseconds.
    Naive values are taken as UTC.
    """
    if value is None or isinstance(value, bool):
        return None

    if isinstance(value, dt.datetime):
        d = value
    elif isinstance(value, (int, float)):
        try:
            return dt.datetime.fromtimestamp(float(value) / 1000.0, tz=dt.timezone.utc)
        except (OverflowError, OSError, ValueError):
            return None
    elif isinstance(value, str):
        s = value.strip()
        if not s:
            return None
        m = _COMPACT_UTC_RE.match(s)
        try:
            if m:
                d = dt.datetime.strptime(s, "%Y%m%dT%H%M%SZ")
            else:
                d = dt.datetime.fromisoformat(s.replace("Z", "+00:00"))
        except ValueError:
            return None
    else:
        return None

    if d.tzinfo is None:
        d = d.replace(tzinfo=dt.timezone.utc)
    return d


def at_wall_clock(day: dt.date, hour: int, minute: int, tz: dt.tzinfo) -> dt.datetime:
    return dt.datetime(day.year, day.month, day.day, int(hour), int(minute), tzinfo=tz)


def shift_minutes(ts: dt.datetime, minutes: float, tz: dt.tzinfo) -> dt.datetime:
    """Shift by elapsed minutes (not wall-clock minutes), result expressed in `tz`."""
    moved = ts.astimezone(dt.timezone.utc) + dt.timedelta(minutes=minutes)
    return moved.astimezone(tz)


def elapsed_minutes(start: dt.datetime, end: dt.datetime) -> float:
    # Same-tzinfo subtraction is wall-clock; go through UTC for real elapsed time.
    utc = dt.timezone.utc
    return (end.astimezone(utc) - start.astimezone(utc)).total_seconds() / 60.0
