"""Pointer-driven drag state machine for the weekly time grid.

The machine is a pure function `transition(session, event, tz)` returning the
next session and the effects to emit. `InteractionController` wraps it with
the single mutable session and dispatches effects to host callbacks.

Sessions:
  Idle       -> waiting for pointer-down
  Selecting  -> drawing a new appointment (committed once, on release)
  Moving     -> dragging an appointment body (update emitted on every move)
  Resizing   -> dragging a top/bottom handle (update emitted on every move)
"""

from __future__ import annotations

import datetime as dt
from typing import Callable, List, Optional, Tuple, Union

from .model import (
    IDLE,
    CellRect,
    CreateAppointment,
    DragSession,
    Effect,
    HitKind,
    Idle,
    Moving,
    PointerEvent,
    PointerKind,
    Resizing,
    Selecting,
    UpdateAppointment,
)
from .normalize import normalize_appointment
from .preview import preview_rect, preview_rows
from .timegrid import (
    DEFAULT_CREATE_MINUTES,
    MIN_GAP_MINUTES,
    at_cell,
    clamp,
    normalize_range,
    pixel_to_minute,
)
from .util.console import obs
from .util.tz import elapsed_minutes, resolve_tz, shift_minutes

Transition = Tuple[DragSession, List[Effect]]

CreateCallback = Callable[[dt.datetime, dt.datetime], object]
UpdateCallback = Callable[[str, dt.datetime, dt.datetime], object]


def commit_selection(session: Selecting, tz: dt.tzinfo) -> CreateAppointment:
    """Turn a finished selection into a create request.

    The range is ordered start < end; anything shorter than MIN_GAP_MINUTES
    becomes a DEFAULT_CREATE_MINUTES appointment at the (ordered) start.
    """
    a = at_cell(session.day, session.start_hour, session.start_minute, tz)
    b = at_cell(session.day, session.end_hour, session.end_minute, tz)
    start, end = normalize_range(a, b)
    if elapsed_minutes(start, end) < MIN_GAP_MINUTES:
        end = shift_minutes(start, DEFAULT_CREATE_MINUTES, tz)
    return CreateAppointment(start=start, end=end)


def _on_down(session: DragSession, ev: PointerEvent, tz: dt.tzinfo) -> Transition:
    if not isinstance(session, Idle):
        # A nested session is never started.
        return session, []
    if not ev.in_cell:
        return session, []

    minute = pixel_to_minute(ev.offset_y, ev.cell_height)

    if ev.hit == HitKind.EMPTY:
        return (
            Selecting(day=ev.day, start_hour=int(ev.hour), start_minute=minute, end_hour=int(ev.hour), end_minute=minute),
            [],
        )

    apt = normalize_appointment(ev.appointment)
    if apt is None:
        return session, []
    start = apt.start_time.astimezone(tz)
    end = apt.end_time.astimezone(tz)

    if ev.hit == HitKind.APPOINTMENT_BODY:
        return (
            Moving(
                appointment_id=apt.id,
                grab_offset_minutes=minute - start.minute,
                start_time=start,
                end_time=end,
            ),
            [],
        )
    if ev.hit == HitKind.RESIZE_TOP:
        return Resizing(appointment_id=apt.id, edge="top", start_time=start, end_time=end), []
    if ev.hit == HitKind.RESIZE_BOTTOM:
        return Resizing(appointment_id=apt.id, edge="bottom", start_time=start, end_time=end), []
    return session, []


def _on_move(session: DragSession, ev: PointerEvent, tz: dt.tzinfo) -> Transition:
    if isinstance(session, Idle) or not ev.in_cell:
        return session, []

    minute = pixel_to_minute(ev.offset_y, ev.cell_height)

    if isinstance(session, Selecting):
        if ev.day != session.day:
            return session, []
        return Selecting(
            day=session.day,
            start_hour=session.start_hour,
            start_minute=session.start_minute,
            end_hour=int(ev.hour),
            end_minute=minute,
        ), []

    if isinstance(session, Moving):
        duration = elapsed_minutes(session.start_time, session.end_time)
        start = at_cell(ev.day, int(ev.hour), clamp(minute - session.grab_offset_minutes, 0, 59), tz)
        end = shift_minutes(start, duration, tz)
        return session, [UpdateAppointment(appointment_id=session.appointment_id, start=start, end=end)]

    if isinstance(session, Resizing):
        start = session.start_time
        end = session.end_time
        candidate = at_cell(ev.day, int(ev.hour), minute, tz)
        if session.edge == "top":
            limit = shift_minutes(end, -MIN_GAP_MINUTES, tz)
            start = limit if elapsed_minutes(limit, candidate) >= 0 else candidate
        else:
            limit = shift_minutes(start, MIN_GAP_MINUTES, tz)
            end = limit if elapsed_minutes(candidate, limit) >= 0 else candidate
        return session, [UpdateAppointment(appointment_id=session.appointment_id, start=start, end=end)]

    return session, []


def _on_release(session: DragSession, tz: dt.tzinfo) -> Transition:
    if isinstance(session, Selecting):
        return IDLE, [commit_selection(session, tz)]
    # Moving/Resizing already emitted their updates live.
    return IDLE, []


def transition(session: DragSession, event: PointerEvent, tz: dt.tzinfo) -> Transition:
    """(session, event) -> (next session, effects). Pure; never raises on bad geometry."""
    kind = event.kind
    if kind == PointerKind.DOWN:
        return _on_down(session, event, tz)
    if kind == PointerKind.MOVE:
        return _on_move(session, event, tz)
    if kind in (PointerKind.UP, PointerKind.LEAVE):
        return _on_release(session, tz)
    return session, []


def _session_name(session: DragSession) -> str:
    return type(session).__name__.lower()


class InteractionController:
    """Owns the active drag session and forwards effects to the host.

    Callbacks run synchronously, once per effect: create on selection commit,
    update on every pointer-move of a move/resize drag. Their results are not
    awaited or inspected, and exceptions propagate to the caller after the
    session has already advanced.
    """

    def __init__(
        self,
        *,
        tz: Union[dt.tzinfo, str, None] = None,
        on_create_appointment: Optional[CreateCallback] = None,
        on_update_appointment: Optional[UpdateCallback] = None,
    ) -> None:
        self.tz: dt.tzinfo = tz if isinstance(tz, dt.tzinfo) else resolve_tz(tz)
        self.on_create_appointment = on_create_appointment
        self.on_update_appointment = on_update_appointment
        self._session: DragSession = IDLE

    @property
    def session(self) -> DragSession:
        return self._session

    @property
    def is_active(self) -> bool:
        return not isinstance(self._session, Idle)

    def reset(self) -> None:
        self._session = IDLE

    def handle(self, event: PointerEvent) -> List[Effect]:
        before = self._session
        after, effects = transition(before, event, self.tz)
        self._session = after
        if type(after) is not type(before):
            obs("interaction", f"{event.kind.value}: {_session_name(before)} -> {_session_name(after)}")

        for eff in effects:
            self._dispatch(eff)
        return effects

    def _dispatch(self, eff: Effect) -> None:
        if isinstance(eff, CreateAppointment):
            obs("interaction", f"create start={eff.start.isoformat()} end={eff.end.isoformat()}")
            if self.on_create_appointment is not None:
                self.on_create_appointment(eff.start, eff.end)
        elif isinstance(eff, UpdateAppointment):
            obs(
                "interaction",
                f"update id={eff.appointment_id!r} start={eff.start.isoformat()} end={eff.end.isoformat()}",
            )
            if self.on_update_appointment is not None:
                self.on_update_appointment(eff.appointment_id, eff.start, eff.end)

    def preview_rect(self, day: dt.date, hour: int) -> Optional[CellRect]:
        return preview_rect(self._session, day, hour)

    def preview_rows(self) -> dict:
        return preview_rows(self._session)
