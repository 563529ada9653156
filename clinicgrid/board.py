# clinicgrid/board.py
from __future__ import annotations

import datetime as dt
from dataclasses import dataclass
from typing import Any, Dict, Iterable, List, Mapping, Optional, Tuple

from .config import GridConfig
from .layout import layout_cell
from .model import IDLE, CellRect, DragSession, PlacedAppointment
from .normalize import normalize_appointments
from .palette import status_info
from .preview import preview_rect
from .week import is_today, week_days, week_label, week_start


@dataclass(frozen=True)
class BoardCell:
    day: dt.date
    hour: int
    appointments: Tuple[PlacedAppointment, ...]
    preview: Optional[CellRect]


@dataclass(frozen=True)
class WeekBoard:
    start: dt.date
    label: str
    days: Tuple[dt.date, ...]
    hours: Tuple[int, ...]
    today: Optional[dt.date]
    cells: Dict[Tuple[dt.date, int], BoardCell]

    def cell(self, day: dt.date, hour: int) -> BoardCell:
        return self.cells[(day, hour)]


def build_week_board(
    appointments: Iterable[Any],
    reference: dt.date,
    cfg: Optional[GridConfig] = None,
    *,
    session: DragSession = IDLE,
    type_colors: Optional[Mapping[str, str]] = None,
) -> WeekBoard:
    """Static geometry for one rendered week: per day x hour-row appointments and preview."""
    cfg = cfg or GridConfig()
    tz = cfg.tzinfo()
    apts = normalize_appointments(appointments)

    start = week_start(reference, cfg.week_starts_on)
    days = tuple(week_days(start))
    hours = tuple(cfg.hours)

    cells: Dict[Tuple[dt.date, int], BoardCell] = {}
    for day in days:
        for hour in hours:
            cells[(day, hour)] = BoardCell(
                day=day,
                hour=hour,
                appointments=tuple(layout_cell(apts, day, hour, tz, session=session, type_colors=type_colors)),
                preview=preview_rect(session, day, hour),
            )

    today = next((d for d in days if is_today(d, tz)), None)
    return WeekBoard(start=start, label=week_label(start), days=days, hours=hours, today=today, cells=cells)


def _placed_to_dict(p: PlacedAppointment) -> Dict[str, Any]:
    apt = p.appointment
    st = status_info(apt.status)
    return {
        "id": apt.id,
        "start_time": apt.start_time.isoformat(),
        "end_time": apt.end_time.isoformat(),
        "appointment_type": apt.appointment_type,
        "status": apt.status,
        "status_label": st.label,
        "client_id": apt.client_id,
        "title": p.title,
        "color": p.color,
        "style": p.rect.as_css(),
        "dragging": p.is_dragging,
        "resizing": p.is_resizing,
    }


def board_to_dict(board: WeekBoard) -> Dict[str, Any]:
    rows: List[Dict[str, Any]] = []
    for hour in board.hours:
        cols: List[Dict[str, Any]] = []
        for day in board.days:
            c = board.cell(day, hour)
            cols.append(
                {
                    "day": day.isoformat(),
                    "appointments": [_placed_to_dict(p) for p in c.appointments],
                    "preview": c.preview.as_css() if c.preview else None,
                }
            )
        rows.append({"hour": hour, "label": f"{hour}:00", "cells": cols})

    return {
        "week_start": board.start.isoformat(),
        "label": board.label,
        "days": [d.isoformat() for d in board.days],
        "today": board.today.isoformat() if board.today else None,
        "rows": rows,
    }
