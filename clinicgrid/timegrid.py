# clinicgrid/timegrid.py
from __future__ import annotations

import datetime as dt
import math
from typing import Tuple

from .model import CellRect
from .util.tz import at_wall_clock, elapsed_minutes

MIN_GAP_MINUTES = 15
DEFAULT_CREATE_MINUTES = 30
PREVIEW_MIN_HEIGHT_PERCENT = 5.0


def clamp(v: int, lo: int, hi: int) -> int:
    return max(lo, min(hi, v))


def pixel_to_minute(offset_y: float, cell_height: float) -> int:
    """Minute within an hour-row for a pixel offset from the row's top, in [0, 59].

    Offsets outside the row are clamped; a degenerate cell (height <= 0 or NaN
    input) maps to minute 0.
    """
    try:
        y = float(offset_y)
        h = float(cell_height)
    except (TypeError, ValueError):
        return 0
    if not (h > 0) or math.isnan(y):
        return 0
    x = y / h * 60
    if math.isnan(x):
        return 0
    if math.isinf(x):
        return 59 if x > 0 else 0
    # Half-up like the browser's Math.round, not banker's rounding.
    minute = math.floor(x + 0.5)
    return clamp(int(minute), 0, 59)


def range_to_geometry(start: dt.datetime, end: dt.datetime) -> CellRect:
    """Placement of [start, end) inside the hour-row containing `start`.

    Durations running past the end of the hour give height > 100; the rectangle
    overflows into the rows below instead of being split.
    """
    top = (start.minute / 60.0) * 100.0
    height = (elapsed_minutes(start, end) / 60.0) * 100.0
    return CellRect(top_percent=top, height_percent=height)


def normalize_range(start: dt.datetime, end: dt.datetime) -> Tuple[dt.datetime, dt.datetime]:
    if elapsed_minutes(start, end) < 0:
        return end, start
    return start, end


def at_cell(day: dt.date, hour: int, minute: int, tz: dt.tzinfo) -> dt.datetime:
    """Wall-clock timestamp of a grid position (day column, hour-row, minute)."""
    return at_wall_clock(day, hour, clamp(int(minute), 0, 59), tz)
