# clinicgrid/palette.py
from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, List, Mapping, Optional, Tuple

DEFAULT_TYPE_COLOR = "bg-gray-600"

APPOINTMENT_TYPE_COLORS: Dict[str, str] = {
    "vaccination": "bg-purple-500",
    "surgery": "bg-red-600",
    "checkup": "bg-blue-500",
    "treatment": "bg-green-600",
    "consultation": "bg-yellow-500",
    "emergency": "bg-orange-600",
    "follow-up": "bg-teal-500",
}


@dataclass(frozen=True)
class StatusInfo:
    label: str
    variant: str
    color: str


STATUS_CONFIG: Dict[str, StatusInfo] = {
    "scheduled": StatusInfo(label="Scheduled", variant="default", color="bg-blue-500"),
    "confirmed": StatusInfo(label="Confirmed", variant="default", color="bg-green-500"),
    "cancelled": StatusInfo(label="Cancelled", variant="destructive", color="bg-red-500"),
    "completed": StatusInfo(label="Completed", variant="secondary", color="bg-gray-500"),
    "no_show": StatusInfo(label="No show", variant="outline", color="bg-yellow-600"),
}


def type_color(appointment_type: Optional[str], overrides: Optional[Mapping[str, str]] = None) -> str:
    """Color token for an appointment type (override table > built-in table > default)."""
    key = str(appointment_type or "")
    if overrides and key in overrides:
        return overrides[key]
    return APPOINTMENT_TYPE_COLORS.get(key, DEFAULT_TYPE_COLOR)


def status_info(status: Optional[str]) -> StatusInfo:
    key = str(status or "")
    info = STATUS_CONFIG.get(key)
    if info is not None:
        return info
    return StatusInfo(label=key, variant="default", color="")


def legend(overrides: Optional[Mapping[str, str]] = None) -> List[Tuple[str, str]]:
    """(type, color) pairs for the color legend, built-in types first."""
    table = dict(APPOINTMENT_TYPE_COLORS)
    if overrides:
        table.update(overrides)
    return list(table.items())
