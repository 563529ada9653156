from __future__ import annotations

import os
import sys
from typing import Any


def eprint(*args: Any) -> None:
    print(*args, file=sys.stderr)


def obs_enabled() -> bool:
    v = (os.getenv("CLINICGRID_OBS_LOG", "") or "").strip().lower()
    return v in {"1", "true", "yes", "on"}


def obs(component: str, msg: str) -> None:
    """Emit a `[clinicgrid.<component>] msg` trace line when CLINICGRID_OBS_LOG is on."""
    if obs_enabled():
        eprint(f"[clinicgrid.{component}] {msg}")
