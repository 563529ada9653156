"""Appointment row validation helpers (library-facing).

The grid itself never fails on bad rows; it skips them. These helpers are for
hosts and tools that want to report what would be skipped.
"""

from __future__ import annotations

from typing import Any, List

from .util.tz import elapsed_minutes, parse_timestamp


class AppointmentValidationError(ValueError):
    """Raised when appointment rows fail validation."""


def _require(cond: bool, msg: str, errs: List[str]) -> None:
    if not cond:
        errs.append(msg)


def validate_appointment_rows(rows: Any, *, label: str = "appointments") -> List[str]:
    if not isinstance(rows, list):
        return [f"{label}: must be a list"]

    errs: List[str] = []
    seen: set[str] = set()
    for i, row in enumerate(rows):
        if not isinstance(row, dict):
            errs.append(f"{label}[{i}] must be dict")
            continue
        apt_id = str(row.get("id") or "").strip()
        _require(bool(apt_id), f"{label}[{i}].id must be non-empty", errs)
        if apt_id:
            _require(apt_id not in seen, f"{label}[{i}].id duplicated: {apt_id!r}", errs)
            seen.add(apt_id)

        start = parse_timestamp(row.get("start_time"))
        end = parse_timestamp(row.get("end_time"))
        _require(start is not None, f"{label}[{i}].start_time missing or unparseable: {row.get('start_time')!r}", errs)
        _require(end is not None, f"{label}[{i}].end_time missing or unparseable: {row.get('end_time')!r}", errs)
        if start is not None and end is not None:
            _require(elapsed_minutes(start, end) > 0, f"{label}[{i}].end_time must be after start_time", errs)

    return errs


def assert_valid_appointment_rows(rows: Any) -> None:
    errs = validate_appointment_rows(rows)
    if errs:
        raise AppointmentValidationError(errs[0])


__all__ = [
    "AppointmentValidationError",
    "assert_valid_appointment_rows",
    "validate_appointment_rows",
]
