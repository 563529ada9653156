# clinicgrid/layout.py
from __future__ import annotations

import datetime as dt
from typing import Any, Iterable, List, Mapping, Optional

from .model import IDLE, Appointment, DragSession, Moving, PlacedAppointment, Resizing
from .normalize import normalize_appointments
from .palette import type_color
from .timegrid import range_to_geometry


def appointments_for_cell(
    appointments: Iterable[Any],
    day: dt.date,
    hour: int,
    tz: dt.tzinfo,
) -> List[Appointment]:
    """Appointments starting on `day` within local hour `hour`, earliest first.

    Rows that cannot be normalized (missing/unparseable timestamps) are skipped.
    """
    out: List[Appointment] = []
    for apt in normalize_appointments(appointments):
        local = apt.start_time.astimezone(tz)
        if local.date() == day and local.hour == int(hour):
            out.append(apt)
    out.sort(key=lambda a: (a.start_time, a.id))
    return out


def appointment_title(apt: Appointment) -> str:
    return f"{apt.client_name} - {apt.pet_name}"


def layout_cell(
    appointments: Iterable[Any],
    day: dt.date,
    hour: int,
    tz: dt.tzinfo,
    *,
    session: DragSession = IDLE,
    type_colors: Optional[Mapping[str, str]] = None,
) -> List[PlacedAppointment]:
    """Render rectangles for the appointments of one hour-row cell.

    Overlapping appointments share the same horizontal space; they are not
    split into columns.
    """
    dragging_id = session.appointment_id if isinstance(session, Moving) else None
    resizing_id = session.appointment_id if isinstance(session, Resizing) else None

    placed: List[PlacedAppointment] = []
    for apt in appointments_for_cell(appointments, day, hour, tz):
        placed.append(
            PlacedAppointment(
                appointment=apt,
                rect=range_to_geometry(apt.start_time.astimezone(tz), apt.end_time.astimezone(tz)),
                color=type_color(apt.appointment_type, type_colors),
                title=appointment_title(apt),
                is_dragging=apt.id == dragging_id,
                is_resizing=apt.id == resizing_id,
            )
        )
    return placed
