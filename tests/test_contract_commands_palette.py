from __future__ import annotations

import datetime as dt
import unittest

from clinicgrid.commands import HostCommands, context_menu
from clinicgrid.model import Appointment
from clinicgrid.palette import DEFAULT_TYPE_COLOR, legend, status_info, type_color

UTC = dt.timezone.utc


def _apt(client_id=None) -> Appointment:
    return Appointment(
        id="a1",
        start_time=dt.datetime(2025, 10, 6, 9, 0, tzinfo=UTC),
        end_time=dt.datetime(2025, 10, 6, 9, 30, tzinfo=UTC),
        client_id=client_id,
    )


class RecordingCommands:
    def __init__(self) -> None:
        self.calls = []

    def edit(self, appointment) -> None:
        self.calls.append(("edit", appointment.id))

    def navigate_to_client(self, client_id) -> None:
        self.calls.append(("client", client_id))


class TestContextCommandsContract(unittest.TestCase):
    def test_menu_with_client(self) -> None:
        cmds = RecordingCommands()
        items = context_menu(_apt(client_id="c-7"), cmds)
        self.assertEqual([i.key for i in items], ["edit", "client"])
        for item in items:
            item.run()
        self.assertEqual(cmds.calls, [("edit", "a1"), ("client", "c-7")])

    def test_menu_without_client(self) -> None:
        items = context_menu(_apt(), RecordingCommands())
        self.assertEqual([i.key for i in items], ["edit"])

    def test_host_commands_adapter(self) -> None:
        edited, visited = [], []
        cmds = HostCommands(on_edit_appointment=edited.append, on_navigate_to_client=visited.append)
        for item in context_menu(_apt(client_id="c-1"), cmds):
            item.run()
        self.assertEqual([a.id for a in edited], ["a1"])
        self.assertEqual(visited, ["c-1"])

    def test_host_commands_without_callbacks_are_noops(self) -> None:
        for item in context_menu(_apt(client_id="c-1"), HostCommands()):
            item.run()


class TestPaletteContract(unittest.TestCase):
    def test_type_colors(self) -> None:
        self.assertEqual(type_color("vaccination"), "bg-purple-500")
        self.assertEqual(type_color("emergency"), "bg-orange-600")
        self.assertEqual(type_color("unknown"), DEFAULT_TYPE_COLOR)
        self.assertEqual(type_color(None), DEFAULT_TYPE_COLOR)
        self.assertEqual(type_color("unknown", {"unknown": "bg-black"}), "bg-black")

    def test_status_info(self) -> None:
        self.assertEqual(status_info("no_show").label, "No show")
        self.assertEqual(status_info("cancelled").variant, "destructive")
        self.assertEqual(status_info("archived").label, "archived")

    def test_legend(self) -> None:
        pairs = legend({"grooming": "bg-pink-400"})
        self.assertEqual(pairs[0], ("vaccination", "bg-purple-500"))
        self.assertIn(("grooming", "bg-pink-400"), pairs)
        self.assertEqual(len(legend()), 7)


if __name__ == "__main__":
    unittest.main(verbosity=2)
