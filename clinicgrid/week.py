# clinicgrid/week.py
from __future__ import annotations

import datetime as dt
from typing import List, Optional

from .util.tz import today_date

# Python weekday numbers (Monday == 0).
MONDAY = 0
SATURDAY = 5
SUNDAY = 6

_WEEKDAY_NAMES = {
    "monday": 0, "mon": 0,
    "tuesday": 1, "tue": 1,
    "wednesday": 2, "wed": 2,
    "thursday": 3, "thu": 3,
    "friday": 4, "fri": 4,
    "saturday": 5, "sat": 5,
    "sunday": 6, "sun": 6,
}

# Locales whose calendars start the week on a day other than Monday (CLDR firstDay).
_LOCALE_FIRST_DAY = {
    "he": SUNDAY, "he-il": SUNDAY, "en-us": SUNDAY, "en-ca": SUNDAY, "ja": SUNDAY,
    "ko": SUNDAY, "zh-tw": SUNDAY, "pt-br": SUNDAY, "es-mx": SUNDAY, "hi": SUNDAY,
    "ar": SATURDAY, "ar-eg": SATURDAY, "fa": SATURDAY,
}
_LANGUAGE_FIRST_DAY = {"he": SUNDAY, "ja": SUNDAY, "ko": SUNDAY, "hi": SUNDAY, "ar": SATURDAY, "fa": SATURDAY}


def first_weekday_for_locale(locale: Optional[str]) -> int:
    """First day of the week for a locale tag ("he", "en-US", "en_GB"...); ISO Monday if unknown."""
    if not locale:
        return MONDAY
    tag = str(locale).strip().lower().replace("_", "-")
    if tag in _LOCALE_FIRST_DAY:
        return _LOCALE_FIRST_DAY[tag]
    return _LANGUAGE_FIRST_DAY.get(tag.split("-", 1)[0], MONDAY)


def parse_weekday(value: str) -> int:
    """Weekday number from a name ("sunday", "Mon"), a 0-6 digit, or a locale tag."""
    s = str(value).strip().lower()
    if s in _WEEKDAY_NAMES:
        return _WEEKDAY_NAMES[s]
    if s.isdigit() and 0 <= int(s) <= 6:
        return int(s)
    if s and all(ch.isalpha() or ch in "-_" for ch in s):
        return first_weekday_for_locale(s)
    raise ValueError(f"Invalid weekday: {value!r}")


def week_start(reference: dt.date, week_starts_on: int = SUNDAY) -> dt.date:
    if isinstance(reference, dt.datetime):
        reference = reference.date()
    back = (reference.weekday() - int(week_starts_on)) % 7
    return reference - dt.timedelta(days=back)


def week_days(start: dt.date) -> List[dt.date]:
    return [start + dt.timedelta(days=i) for i in range(7)]


def previous_week(reference: dt.date) -> dt.date:
    return reference - dt.timedelta(days=7)


def next_week(reference: dt.date) -> dt.date:
    return reference + dt.timedelta(days=7)


def today(tz: dt.tzinfo) -> dt.date:
    return today_date(tz)


def is_today(day: dt.date, tz: dt.tzinfo) -> bool:
    return day == today_date(tz)


def week_label(start: dt.date) -> str:
    """Header text, e.g. "5 October - 11 October 2025"."""
    end = start + dt.timedelta(days=6)
    return f"{start.day} {start.strftime('%B')} - {end.day} {end.strftime('%B')} {end.year}"
