"""
Tickets component port definitions.
"""

from __future__ import annotations

from datetime import datetime
from typing import Protocol
from uuid import UUID

from maintrack.domain.entities import Ticket


class TicketRepoPort(Protocol):
    def save(self, ticket: Ticket) -> Ticket: ...

    def get_by_id(self, ticket_id: UUID) -> Ticket | None: ...

    def list(self, status: str | None = None) -> list[Ticket]:
        """Tickets ordered by date, newest first."""
        ...

    def delete(self, ticket_id: UUID) -> None: ...


class TimePort(Protocol):
    def now_utc(self) -> datetime: ...
