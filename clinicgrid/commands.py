"""Context-menu commands for an appointment block.

The host injects the capabilities; this module only decides which menu items
apply to an appointment and invokes the matching capability. It is not part
of the drag state machine.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, List, Optional, Protocol

from .model import Appointment


class AppointmentCommands(Protocol):
    def edit(self, appointment: Appointment) -> None:
        """Open the host's editor for the appointment."""

    def navigate_to_client(self, client_id: str) -> None:
        """Open the client record."""


class HostCommands:
    """AppointmentCommands built from optional host callbacks; missing ones are no-ops."""

    def __init__(
        self,
        on_edit_appointment: Optional[Callable[[Appointment], object]] = None,
        on_navigate_to_client: Optional[Callable[[str], object]] = None,
    ) -> None:
        self.on_edit_appointment = on_edit_appointment
        self.on_navigate_to_client = on_navigate_to_client

    def edit(self, appointment: Appointment) -> None:
        if self.on_edit_appointment is not None:
            self.on_edit_appointment(appointment)

    def navigate_to_client(self, client_id: str) -> None:
        if self.on_navigate_to_client is not None:
            self.on_navigate_to_client(client_id)


@dataclass(frozen=True)
class MenuItem:
    key: str      # "edit" | "client"
    label: str
    action: Callable[[], None]

    def run(self) -> None:
        self.action()


def context_menu(appointment: Appointment, commands: AppointmentCommands) -> List[MenuItem]:
    items = [MenuItem(key="edit", label="Edit appointment", action=lambda: commands.edit(appointment))]
    client_id = appointment.client_id
    if client_id:
        items.append(
            MenuItem(key="client", label="Client card", action=lambda: commands.navigate_to_client(client_id))
        )
    return items
