"""
Dashboard component port definitions.

Read-only views over the asset, ticket and maintenance repositories.
"""

from __future__ import annotations

from datetime import date
from typing import Protocol

from maintrack.domain.entities import Equipment, MaintenanceRecord, Peripheral, Ticket


class EquipmentListPort(Protocol):
    def list_all(self) -> list[Equipment]: ...


class PeripheralListPort(Protocol):
    def list_all(self) -> list[Peripheral]: ...


class TicketListPort(Protocol):
    def list(self, status: str | None = None) -> list[Ticket]: ...


class MaintenanceRangePort(Protocol):
    def list_in_range(self, start: date, end: date) -> list[MaintenanceRecord]:
        """Records with start <= date < end."""
        ...
