from __future__ import annotations

import datetime as dt
import unittest

from clinicgrid.layout import appointments_for_cell, layout_cell
from clinicgrid.model import IDLE, Appointment, Moving, Resizing

UTC = dt.timezone.utc
MON = dt.date(2025, 10, 6)


def _row(apt_id: str, start: str, end: str, **extra) -> dict:
    row = {"id": apt_id, "start_time": start, "end_time": end, "appointment_type": "checkup", "status": "scheduled"}
    row.update(extra)
    return row


ROWS = [
    _row("a", "2025-10-06T09:15:00Z", "2025-10-06T09:45:00Z"),
    _row("b", "2025-10-06T09:00:00Z", "2025-10-06T10:30:00Z", appointment_type="surgery"),
    _row("c", "2025-10-06T10:00:00Z", "2025-10-06T10:20:00Z"),
    _row("d", "2025-10-07T09:10:00Z", "2025-10-07T09:20:00Z"),
    _row("bad-start", "not-a-date", "2025-10-06T09:30:00Z"),
    _row("no-end", "2025-10-06T09:05:00Z", None),
    _row("reversed", "2025-10-06T09:40:00Z", "2025-10-06T09:20:00Z"),
    {"start_time": "2025-10-06T09:00:00Z", "end_time": "2025-10-06T09:10:00Z"},
    "not-a-row",
]


class TestAppointmentLayoutContract(unittest.TestCase):
    def test_selects_by_day_and_local_hour(self) -> None:
        got = appointments_for_cell(ROWS, MON, 9, UTC)
        self.assertEqual([a.id for a in got], ["b", "a"])
        self.assertEqual([a.id for a in appointments_for_cell(ROWS, MON, 10, UTC)], ["c"])
        self.assertEqual(appointments_for_cell(ROWS, MON, 11, UTC), [])

    def test_selection_uses_grid_timezone(self) -> None:
        plus3 = dt.timezone(dt.timedelta(hours=3))
        # 09:15Z is 12:15 at +03:00
        self.assertEqual([a.id for a in appointments_for_cell(ROWS, MON, 12, plus3)], ["b", "a"])
        self.assertEqual(appointments_for_cell(ROWS, MON, 9, plus3), [])

    def test_geometry_and_overflow(self) -> None:
        placed = {p.appointment.id: p for p in layout_cell(ROWS, MON, 9, UTC)}
        self.assertAlmostEqual(placed["a"].rect.top_percent, 25.0)
        self.assertAlmostEqual(placed["a"].rect.height_percent, 50.0)
        # 90 minutes from the top of the row: overflows into 10:00, not clipped
        self.assertAlmostEqual(placed["b"].rect.top_percent, 0.0)
        self.assertAlmostEqual(placed["b"].rect.height_percent, 150.0)
        self.assertEqual(placed["a"].rect.as_css(), {"top": "25%", "height": "50%"})

    def test_colors_and_titles(self) -> None:
        rows = [
            _row("x", "2025-10-06T11:00:00Z", "2025-10-06T11:30:00Z", appointment_type="surgery",
                 clients={"first_name": "Dana", "last_name": "Levi"}, pets={"name": "Rex"}),
            _row("y", "2025-10-06T11:10:00Z", "2025-10-06T11:30:00Z", appointment_type="grooming"),
        ]
        placed = {p.appointment.id: p for p in layout_cell(rows, MON, 11, UTC)}
        self.assertEqual(placed["x"].color, "bg-red-600")
        self.assertEqual(placed["y"].color, "bg-gray-600")
        self.assertEqual(placed["x"].title, "Dana Levi - Rex")

        custom = layout_cell(rows, MON, 11, UTC, type_colors={"grooming": "bg-pink-400"})
        self.assertEqual({p.appointment.id: p.color for p in custom}["y"], "bg-pink-400")

    def test_overlapping_appointments_share_the_cell(self) -> None:
        rows = [
            _row("p", "2025-10-06T14:00:00Z", "2025-10-06T15:00:00Z"),
            _row("q", "2025-10-06T14:00:00Z", "2025-10-06T15:00:00Z"),
        ]
        rects = [p.rect for p in layout_cell(rows, MON, 14, UTC)]
        self.assertEqual(len(rects), 2)
        self.assertEqual(rects[0], rects[1])

    def test_session_flags(self) -> None:
        apts = appointments_for_cell(ROWS, MON, 9, UTC)
        a = next(x for x in apts if x.id == "a")
        moving = Moving(appointment_id="a", grab_offset_minutes=0, start_time=a.start_time, end_time=a.end_time)
        flags = {p.appointment.id: (p.is_dragging, p.is_resizing) for p in layout_cell(ROWS, MON, 9, UTC, session=moving)}
        self.assertEqual(flags, {"a": (True, False), "b": (False, False)})

        resizing = Resizing(appointment_id="b", edge="top", start_time=a.start_time, end_time=a.end_time)
        flags = {p.appointment.id: (p.is_dragging, p.is_resizing) for p in layout_cell(ROWS, MON, 9, UTC, session=resizing)}
        self.assertEqual(flags, {"a": (False, False), "b": (False, True)})

        flags = {p.appointment.id: (p.is_dragging, p.is_resizing) for p in layout_cell(ROWS, MON, 9, UTC, session=IDLE)}
        self.assertEqual(set(flags.values()), {(False, False)})

    def test_empty_or_none_inputs(self) -> None:
        self.assertEqual(layout_cell([], MON, 9, UTC), [])
        self.assertEqual(layout_cell(None, MON, 9, UTC), [])

    def test_appointment_objects_with_unusable_timestamps_are_skipped(self) -> None:
        rows = [
            Appointment(id="none", start_time=None, end_time=None),
            Appointment(id="garbage", start_time="soon", end_time="later"),
            Appointment(id="ok", start_time=dt.datetime(2025, 10, 6, 9, 0, tzinfo=UTC), end_time=dt.datetime(2025, 10, 6, 9, 30, tzinfo=UTC)),
        ]
        self.assertEqual([p.appointment.id for p in layout_cell(rows, MON, 9, UTC)], ["ok"])

    def test_appointment_objects_with_string_timestamps_are_parsed(self) -> None:
        apt = Appointment(id="iso", start_time="2025-10-06T09:30:00Z", end_time="2025-10-06T10:00:00Z")
        placed = layout_cell([apt], MON, 9, UTC)
        self.assertEqual(len(placed), 1)
        self.assertEqual(placed[0].appointment.start_time, dt.datetime(2025, 10, 6, 9, 30, tzinfo=UTC))
        self.assertEqual((placed[0].rect.top_percent, placed[0].rect.height_percent), (50.0, 50.0))


if __name__ == "__main__":
    unittest.main(verbosity=2)
