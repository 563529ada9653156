#!/usr/bin/env python3
"""Replay a recorded pointer-event script through the interaction controller.

Script format (JSON object):
  {
    "tz": "UTC",
    "cell_height": 80,
    "appointments": [{"id": "a1", "start_time": "...", "end_time": "..."}],
    "events": [
      {"kind": "down", "hit": "empty", "day": "2025-10-06", "hour": 14, "offset_y": 0},
      {"kind": "move", "day": "2025-10-06", "hour": 14, "offset_y": 6.7},
      {"kind": "up"}
    ]
  }

Events may reference an appointment by "appointment_id". Each host callback the
controller invokes is printed as one JSON line.
"""

from __future__ import annotations

import argparse
import datetime as dt
import json
import sys
from pathlib import Path
from typing import Any, Dict, List, Optional

from clinicgrid.interaction import InteractionController
from clinicgrid.model import Appointment, HitKind, PointerEvent, PointerKind
from clinicgrid.normalize import normalize_appointments
from clinicgrid.util.timeparse import parse_date_yyyy_mm_dd


def _die(msg: str, rc: int = 2) -> int:
    print(f"[clinicgrid-replay] ERROR: {msg}", file=sys.stderr)
    return rc


def _load_script(path: Path) -> Dict[str, Any]:
    obj = json.loads(path.read_text(encoding="utf-8", errors="replace"))
    if not isinstance(obj, dict):
        raise ValueError(f"script must be a JSON object; got {type(obj).__name__}")
    if not isinstance(obj.get("events"), list):
        raise ValueError("script.events must be a list")
    return obj


def parse_event(
    raw: Dict[str, Any],
    *,
    cell_height: float,
    by_id: Dict[str, Appointment],
) -> PointerEvent:
    if not isinstance(raw, dict):
        raise ValueError("event must be an object")
    kind = PointerKind(str(raw.get("kind") or ""))
    hit = HitKind(str(raw.get("hit") or HitKind.EMPTY.value))

    day: Optional[dt.date] = None
    if raw.get("day"):
        day = parse_date_yyyy_mm_dd(str(raw["day"]))
    hour = raw.get("hour")
    if hour is not None and not isinstance(hour, int):
        raise ValueError(f"event.hour must be int; got {hour!r}")

    cell_top = float(raw.get("cell_top", 0.0))
    if "offset_y" in raw:
        client_y = cell_top + float(raw["offset_y"])
    else:
        client_y = float(raw.get("client_y", cell_top))

    apt = None
    apt_id = raw.get("appointment_id")
    if apt_id is not None:
        apt = by_id.get(str(apt_id))
        if apt is None:
            raise ValueError(f"unknown appointment_id: {apt_id!r}")

    return PointerEvent(
        kind=kind,
        hit=hit,
        day=day,
        hour=hour,
        client_x=float(raw.get("client_x", 0.0)),
        client_y=client_y,
        cell_top=cell_top,
        cell_height=float(raw.get("cell_height", cell_height)),
        appointment=apt,
    )


def main(argv: List[str] | None = None) -> int:
    ap = argparse.ArgumentParser(
        prog="clinicgrid-replay-events",
        description="Replay pointer events through the week-grid interaction controller.",
    )
    ap.add_argument("--in", dest="in_json", required=True, help="Event script JSON path")
    ap.add_argument("--tz", default=None, help="Grid timezone (overrides script.tz)")
    ns = ap.parse_args(argv)

    in_path = Path(ns.in_json)
    if not in_path.exists():
        return _die(f"Missing input JSON: {in_path}")
    try:
        script = _load_script(in_path)
    except Exception as e:
        return _die(f"Failed to load JSON: {in_path} ({e})")

    apts = normalize_appointments(script.get("appointments") or [])
    by_id = {a.id: a for a in apts}
    cell_height = float(script.get("cell_height") or 80.0)

    def on_create(start: dt.datetime, end: dt.datetime) -> None:
        print(json.dumps({"call": "create", "start": start.isoformat(), "end": end.isoformat()}, sort_keys=True))

    def on_update(apt_id: str, start: dt.datetime, end: dt.datetime) -> None:
        print(json.dumps({"call": "update", "id": apt_id, "start": start.isoformat(), "end": end.isoformat()}, sort_keys=True))

    try:
        ctl = InteractionController(
            tz=ns.tz or script.get("tz"),
            on_create_appointment=on_create,
            on_update_appointment=on_update,
        )
    except ValueError as e:
        return _die(f"Invalid timezone: {e}")

    for i, raw in enumerate(script["events"]):
        try:
            ev = parse_event(raw, cell_height=cell_height, by_id=by_id)
        except (TypeError, ValueError) as e:
            return _die(f"events[{i}]: {e}", rc=3)
        ctl.handle(ev)

    if ctl.is_active:
        # A script that ends mid-drag is closed like the pointer leaving the grid.
        ctl.handle(PointerEvent(kind=PointerKind.LEAVE))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
