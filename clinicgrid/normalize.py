# clinicgrid/normalize.py
from __future__ import annotations

from dataclasses import replace
from typing import Any, Dict, Iterable, List, Optional

from .model import Appointment
from .util.console import obs
from .util.tz import elapsed_minutes, parse_timestamp


def _opt_str(v: Any) -> Optional[str]:
    if v is None:
        return None
    s = str(v).strip()
    return s or None


def _client_name(row: Dict[str, Any]) -> str:
    c = row.get("clients") or row.get("client")
    if isinstance(c, dict):
        parts = [str(c.get("first_name") or "").strip(), str(c.get("last_name") or "").strip()]
        return " ".join(p for p in parts if p)
    return str(row.get("client_name") or "").strip()


def _pet_name(row: Dict[str, Any]) -> str:
    p = row.get("pets") or row.get("pet")
    if isinstance(p, dict):
        return str(p.get("name") or "").strip()
    return str(row.get("pet_name") or "").strip()


def normalize_appointment(row: Any) -> Optional[Appointment]:
    """Build an Appointment from a host row, or None if it cannot be placed.

    Rows without an id, with missing/unparseable timestamps, or with
    end_time <= start_time are rejected.
    """
    if isinstance(row, Appointment):
        start = parse_timestamp(row.start_time)
        end = parse_timestamp(row.end_time)
        if start is None or end is None:
            obs("normalize", f"WARN: invalid timestamp id={row.id!r} start={row.start_time!r} end={row.end_time!r}")
            return None
        if elapsed_minutes(start, end) <= 0:
            obs("normalize", f"WARN: non-positive range id={row.id!r}")
            return None
        if start is row.start_time and end is row.end_time:
            return row
        return replace(row, start_time=start, end_time=end)
    if not isinstance(row, dict):
        return None

    apt_id = _opt_str(row.get("id"))
    if not apt_id:
        return None

    start_raw = row.get("start_time")
    end_raw = row.get("end_time")
    start = parse_timestamp(start_raw)
    end = parse_timestamp(end_raw)
    if start is None or end is None:
        obs("normalize", f"WARN: invalid timestamp id={apt_id!r} start={start_raw!r} end={end_raw!r}")
        return None
    if elapsed_minutes(start, end) <= 0:
        obs("normalize", f"WARN: non-positive range id={apt_id!r} start={start_raw!r} end={end_raw!r}")
        return None

    return Appointment(
        id=apt_id,
        start_time=start,
        end_time=end,
        appointment_type=str(row.get("appointment_type") or ""),
        status=str(row.get("status") or ""),
        client_id=_opt_str(row.get("client_id")),
        pet_id=_opt_str(row.get("pet_id")),
        client_name=_client_name(row),
        pet_name=_pet_name(row),
        notes=str(row.get("notes") or ""),
        raw=dict(row),
    )


def normalize_appointments(rows: Iterable[Any]) -> List[Appointment]:
    out: List[Appointment] = []
    if rows is None:
        return out
    for row in rows:
        apt = normalize_appointment(row)
        if apt is not None:
            out.append(apt)
    return out
