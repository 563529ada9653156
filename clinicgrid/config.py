# clinicgrid/config.py
from __future__ import annotations

import datetime as dt
import os
from dataclasses import dataclass, replace
from typing import Any, List, Mapping, Optional

from .util.timeparse import parse_hour_rows
from .util.tz import normalize_tz_name, resolve_tz
from .week import SUNDAY, parse_weekday


class ConfigError(ValueError):
    """Raised when a grid setting (env or override) is invalid."""


@dataclass(frozen=True)
class GridConfig:
    tz: str = "local"
    first_hour: int = 6
    last_hour: int = 20          # inclusive: the last visible hour-row
    week_starts_on: int = SUNDAY
    cell_height_px: float = 80.0

    @property
    def hours(self) -> List[int]:
        return list(range(self.first_hour, self.last_hour + 1))

    def tzinfo(self) -> dt.tzinfo:
        return resolve_tz(self.tz)


def _check(cfg: GridConfig) -> GridConfig:
    try:
        cfg.tzinfo()
    except ValueError as e:
        raise ConfigError(str(e)) from e
    if not (0 <= cfg.first_hour <= cfg.last_hour <= 23):
        raise ConfigError(f"visible hours must satisfy 0 <= first <= last <= 23 (got {cfg.first_hour}..{cfg.last_hour})")
    if not (0 <= cfg.week_starts_on <= 6):
        raise ConfigError(f"week_starts_on must be 0..6 (got {cfg.week_starts_on})")
    if not (cfg.cell_height_px > 0):
        raise ConfigError(f"cell_height_px must be positive (got {cfg.cell_height_px})")
    return cfg


def load_config(env: Optional[Mapping[str, str]] = None, **overrides: Any) -> GridConfig:
    """Build a GridConfig from CLINICGRID_* environment variables, then keyword overrides.

    CLINICGRID_TZ          timezone ("local", "UTC", IANA name, "+02:00")
    CLINICGRID_HOURS       visible hours window, e.g. "06:00-21:00"
    CLINICGRID_WEEK_START  weekday name, 0-6, or locale tag ("he", "en-GB")
    CLINICGRID_CELL_HEIGHT hour-row height in pixels
    """
    env = os.environ if env is None else env
    cfg = GridConfig()

    tz_raw = (env.get("CLINICGRID_TZ") or "").strip()
    if tz_raw:
        cfg = replace(cfg, tz=normalize_tz_name(tz_raw))

    hours_raw = (env.get("CLINICGRID_HOURS") or "").strip()
    if hours_raw:
        try:
            first, last = parse_hour_rows(hours_raw)
        except ValueError as e:
            raise ConfigError(f"CLINICGRID_HOURS: {e}") from e
        cfg = replace(cfg, first_hour=first, last_hour=last)

    ws_raw = (env.get("CLINICGRID_WEEK_START") or "").strip()
    if ws_raw:
        try:
            cfg = replace(cfg, week_starts_on=parse_weekday(ws_raw))
        except ValueError as e:
            raise ConfigError(f"CLINICGRID_WEEK_START: {e}") from e

    ch_raw = (env.get("CLINICGRID_CELL_HEIGHT") or "").strip()
    if ch_raw:
        try:
            cfg = replace(cfg, cell_height_px=float(ch_raw))
        except ValueError as e:
            raise ConfigError(f"CLINICGRID_CELL_HEIGHT: invalid number {ch_raw!r}") from e

    if overrides:
        unknown = sorted(k for k in overrides if k not in GridConfig.__dataclass_fields__)
        if unknown:
            raise ConfigError(f"unknown config keys: {', '.join(unknown)}")
        if "tz" in overrides:
            overrides["tz"] = normalize_tz_name(overrides["tz"])
        cfg = replace(cfg, **overrides)

    return _check(cfg)
