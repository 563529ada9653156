"""clinicgrid.api

Stable *library* entrypoint for clinicgrid.

Policy:
  - Only names listed in __all__ are considered public API.
  - Everything else is internal and may change without notice.
"""

from __future__ import annotations

from clinicgrid.board import BoardCell, WeekBoard, board_to_dict, build_week_board
from clinicgrid.commands import AppointmentCommands, HostCommands, MenuItem, context_menu
from clinicgrid.config import ConfigError, GridConfig, load_config
from clinicgrid.interaction import InteractionController, commit_selection, transition
from clinicgrid.layout import appointments_for_cell, layout_cell
from clinicgrid.model import (
    IDLE,
    Appointment,
    CellRect,
    CreateAppointment,
    HitKind,
    Idle,
    Moving,
    PlacedAppointment,
    PointerEvent,
    PointerKind,
    Resizing,
    Selecting,
    UpdateAppointment,
)
from clinicgrid.normalize import normalize_appointment, normalize_appointments
from clinicgrid.palette import legend, status_info, type_color
from clinicgrid.preview import preview_rect, preview_rows
from clinicgrid.timegrid import (
    DEFAULT_CREATE_MINUTES,
    MIN_GAP_MINUTES,
    PREVIEW_MIN_HEIGHT_PERCENT,
    normalize_range,
    pixel_to_minute,
    range_to_geometry,
)
from clinicgrid.validate import (
    AppointmentValidationError,
    assert_valid_appointment_rows,
    validate_appointment_rows,
)
from clinicgrid.week import (
    first_weekday_for_locale,
    next_week,
    previous_week,
    today,
    week_days,
    week_label,
    week_start,
)

__all__ = [
    # model
    "Appointment",
    "HitKind",
    "PointerKind",
    "PointerEvent",
    "Idle",
    "IDLE",
    "Selecting",
    "Moving",
    "Resizing",
    "CreateAppointment",
    "UpdateAppointment",
    "CellRect",
    "PlacedAppointment",
    # time grid
    "MIN_GAP_MINUTES",
    "DEFAULT_CREATE_MINUTES",
    "PREVIEW_MIN_HEIGHT_PERCENT",
    "pixel_to_minute",
    "range_to_geometry",
    "normalize_range",
    # layout / preview
    "appointments_for_cell",
    "layout_cell",
    "preview_rect",
    "preview_rows",
    # interaction
    "transition",
    "commit_selection",
    "InteractionController",
    # week
    "week_start",
    "week_days",
    "previous_week",
    "next_week",
    "today",
    "week_label",
    "first_weekday_for_locale",
    # commands / palette
    "AppointmentCommands",
    "HostCommands",
    "MenuItem",
    "context_menu",
    "type_color",
    "status_info",
    "legend",
    # board / config / validation
    "WeekBoard",
    "BoardCell",
    "build_week_board",
    "board_to_dict",
    "GridConfig",
    "ConfigError",
    "load_config",
    "normalize_appointment",
    "normalize_appointments",
    "AppointmentValidationError",
    "validate_appointment_rows",
    "assert_valid_appointment_rows",
]
