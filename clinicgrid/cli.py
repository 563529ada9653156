from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path
from typing import Any, Dict, List

from .board import board_to_dict, build_week_board
from .config import ConfigError, load_config
from .util.timeparse import parse_date_yyyy_mm_dd, parse_hour_rows
from .util.tz import today_date
from .validate import validate_appointment_rows
from .week import parse_weekday


def load_appointment_rows(path: Path) -> List[Dict[str, Any]]:
    """Read appointment rows from a JSON list or an object with an "appointments" list."""
    obj = json.loads(path.read_text(encoding="utf-8", errors="replace"))
    if isinstance(obj, dict):
        obj = obj.get("appointments")
    if not isinstance(obj, list):
        raise ValueError("expected a JSON list of appointments (or {\"appointments\": [...]})")
    return obj


def _die(msg: str, rc: int = 2) -> int:
    print(f"[clinicgrid] ERROR: {msg}", file=sys.stderr)
    return rc


def main(argv: list[str] | None = None) -> int:
    ap = argparse.ArgumentParser(
        prog="clinicgrid",
        description="Lay out a clinic week time-grid (appointments per day x hour-row) as JSON.",
    )
    ap.add_argument("--appointments", required=True, help="Appointments JSON path")
    ap.add_argument("--start", default=None, help="Any date inside the week, YYYY-MM-DD (default: today in --tz)")
    ap.add_argument("--tz", default=None, help="Grid timezone (default: env CLINICGRID_TZ or 'local')")
    ap.add_argument("--hours", default=None, help="Visible hours window, e.g. 06:00-21:00")
    ap.add_argument("--week-start", default=None, help="First weekday: name, 0-6 (Mon=0) or locale tag")
    ap.add_argument("--strict", action="store_true", help="Fail on appointment rows that would be skipped")
    ap.add_argument("--out", default="-", help="Output JSON path (default: stdout)")

    args = ap.parse_args(argv)

    overrides: Dict[str, Any] = {}
    try:
        if args.tz:
            overrides["tz"] = args.tz
        if args.hours:
            overrides["first_hour"], overrides["last_hour"] = parse_hour_rows(args.hours)
        if args.week_start:
            overrides["week_starts_on"] = parse_weekday(args.week_start)
        cfg = load_config(**overrides)
    except (ConfigError, ValueError) as e:
        return _die(f"invalid configuration: {e}")

    if args.start:
        try:
            reference = parse_date_yyyy_mm_dd(args.start)
        except ValueError as e:
            return _die(f"invalid --start: {e}")
    else:
        reference = today_date(cfg.tzinfo())

    try:
        rows = load_appointment_rows(Path(args.appointments))
    except (OSError, ValueError) as e:
        return _die(f"failed to load appointments: {e}")

    errs = validate_appointment_rows(rows)
    if errs:
        if args.strict:
            return _die(f"invalid appointments: {'; '.join(errs[:10])}", rc=3)
        print(f"[clinicgrid] WARN: skipping {len(errs)} invalid appointment field(s): {errs[0]}", file=sys.stderr)

    board = build_week_board(rows, reference, cfg)
    text = json.dumps(board_to_dict(board), ensure_ascii=False, indent=2, sort_keys=True)

    if args.out == "-":
        print(text)
        return 0
    out = Path(args.out).expanduser()
    out.parent.mkdir(parents=True, exist_ok=True)
    out.write_text(text + "\n", encoding="utf-8", newline="\n")
    print(str(out))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
