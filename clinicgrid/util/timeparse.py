# clinicgrid/util/timeparse.py
from __future__ import annotations

import datetime as dt
import re
from typing import Tuple

_HHMM_RE = re.compile(r"^(\d{1,2}):(\d{2})$")


def parse_hhmm(s: str) -> Tuple[int, int]:
    m = _HHMM_RE.match(s.strip())
    if not m:
        raise ValueError(f"Invalid HH:MM: {s!r}")
    hh = int(m.group(1))
    mm = int(m.group(2))
    if not (0 <= hh <= 24 and 0 <= mm <= 59) or (hh == 24 and mm):
        raise ValueError(f"Invalid HH:MM: {s!r}")
    return hh, mm


def parse_hour_rows(s: str) -> Tuple[int, int]:
    """Parse a visible-hours window like "06:00-21:00" into (first_hour, last_hour).

    The end is exclusive on the clock, so "06:00-21:00" shows rows 6..20.
    A window end with minutes past the hour keeps that hour's row.
    """
    parts = s.split("-")
    if len(parts) != 2:
        raise ValueError("hours must be like 06:00-21:00")
    sh, _sm = parse_hhmm(parts[0])
    eh, em = parse_hhmm(parts[1])
    last = eh if em else eh - 1
    if last < sh:
        raise ValueError("hours end must be after start")
    return sh, last


def parse_date_yyyy_mm_dd(s: str) -> dt.date:
    return dt.datetime.strptime(s, "%Y-%m-%d").date()
