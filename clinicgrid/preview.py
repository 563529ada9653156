# clinicgrid/preview.py
from __future__ import annotations

import datetime as dt
from typing import Dict, Optional

from .model import CellRect, DragSession, Selecting
from .timegrid import PREVIEW_MIN_HEIGHT_PERCENT


def _pct(minutes: float) -> float:
    return (minutes / 60.0) * 100.0


def preview_rect(session: DragSession, day: dt.date, hour: int) -> Optional[CellRect]:
    """
    Rectangle of an in-progress selection inside row (day, hour), or None.

    Rows covered by the selection:
      - single row:  from min(start, end) minute, |end - start| tall
      - first row:   from the selection's edge minute to the bottom of the row
      - last row:    from the top of the row to the selection's edge minute
      - middle rows: the full row
    Height never drops below PREVIEW_MIN_HEIGHT_PERCENT.
    """
    if not isinstance(session, Selecting):
        return None
    if day != session.day:
        return None

    sh, sm = session.start_hour, session.start_minute
    eh, em = session.end_hour, session.end_minute
    lo_h, hi_h = min(sh, eh), max(sh, eh)
    if hour < lo_h or hour > hi_h:
        return None

    if sh == eh:
        top = _pct(min(sm, em))
        height = _pct(abs(em - sm))
    elif hour == lo_h:
        edge = sm if sh < eh else em
        top = _pct(edge)
        height = _pct(60 - edge)
    elif hour == hi_h:
        edge = sm if sh > eh else em
        top = 0.0
        height = _pct(edge)
    else:
        top = 0.0
        height = 100.0

    return CellRect(top_percent=top, height_percent=max(height, PREVIEW_MIN_HEIGHT_PERCENT))


def preview_rows(session: DragSession) -> Dict[int, CellRect]:
    """Preview rectangles for every hour-row spanned by a selection, keyed by hour."""
    if not isinstance(session, Selecting):
        return {}
    out: Dict[int, CellRect] = {}
    lo_h = min(session.start_hour, session.end_hour)
    hi_h = max(session.start_hour, session.end_hour)
    for h in range(lo_h, hi_h + 1):
        r = preview_rect(session, session.day, h)
        if r is not None:
            out[h] = r
    return out
