# clinicgrid/model.py
from __future__ import annotations

import datetime as dt
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Optional, Union

from .util.tz import elapsed_minutes


@dataclass(frozen=True)
class Appointment:
    """Read-only snapshot of one appointment as supplied by the host store."""

    id: str
    start_time: dt.datetime
    end_time: dt.datetime
    appointment_type: str = ""
    status: str = ""

    client_id: Optional[str] = None
    pet_id: Optional[str] = None
    client_name: str = ""
    pet_name: str = ""
    notes: str = ""

    raw: Dict[str, Any] = field(default_factory=dict, compare=False, repr=False)

    @property
    def duration_minutes(self) -> float:
        return elapsed_minutes(self.start_time, self.end_time)


class HitKind(str, Enum):
    EMPTY = "empty"
    APPOINTMENT_BODY = "appointment-body"
    RESIZE_TOP = "resize-handle-top"
    RESIZE_BOTTOM = "resize-handle-bottom"


class PointerKind(str, Enum):
    DOWN = "down"
    MOVE = "move"
    UP = "up"
    LEAVE = "leave"


@dataclass(frozen=True)
class PointerEvent:
    """One pointer event over the grid, already hit-tested by the rendering layer.

    day/hour identify the hovered cell (None when the pointer is outside every
    cell, e.g. on leave). cell_top/cell_height are the cell's client-space
    bounds, so offset_y is the pointer's distance from the top of the cell.
    """

    kind: PointerKind
    hit: HitKind = HitKind.EMPTY
    day: Optional[dt.date] = None
    hour: Optional[int] = None
    client_x: float = 0.0
    client_y: float = 0.0
    cell_top: float = 0.0
    cell_height: float = 0.0
    appointment: Optional[Appointment] = None

    @property
    def offset_y(self) -> float:
        return float(self.client_y) - float(self.cell_top)

    @property
    def in_cell(self) -> bool:
        return self.day is not None and self.hour is not None


# Drag sessions
@dataclass(frozen=True)
class Idle:
    pass


@dataclass(frozen=True)
class Selecting:
    day: dt.date
    start_hour: int
    start_minute: int
    end_hour: int
    end_minute: int


@dataclass(frozen=True)
class Moving:
    appointment_id: str
    grab_offset_minutes: int
    start_time: dt.datetime   # as captured at pointer-down
    end_time: dt.datetime


@dataclass(frozen=True)
class Resizing:
    appointment_id: str
    edge: str                 # "top" | "bottom"
    start_time: dt.datetime
    end_time: dt.datetime


DragSession = Union[Idle, Selecting, Moving, Resizing]

IDLE = Idle()


# Effects emitted by the state machine
@dataclass(frozen=True)
class CreateAppointment:
    start: dt.datetime
    end: dt.datetime


@dataclass(frozen=True)
class UpdateAppointment:
    appointment_id: str
    start: dt.datetime
    end: dt.datetime


Effect = Union[CreateAppointment, UpdateAppointment]


@dataclass(frozen=True)
class CellRect:
    """Vertical placement inside one hour-row, in percent of the row height."""

    top_percent: float
    height_percent: float

    def as_css(self) -> Dict[str, str]:
        return {"top": f"{self.top_percent:g}%", "height": f"{self.height_percent:g}%"}


@dataclass(frozen=True)
class PlacedAppointment:
    appointment: Appointment
    rect: CellRect
    color: str
    title: str
    is_dragging: bool = False
    is_resizing: bool = False


__all__ = [
    "Appointment",
    "HitKind",
    "PointerKind",
    "PointerEvent",
    "Idle",
    "Selecting",
    "Moving",
    "Resizing",
    "DragSession",
    "IDLE",
    "CreateAppointment",
    "UpdateAppointment",
    "Effect",
    "CellRect",
    "PlacedAppointment",
]
