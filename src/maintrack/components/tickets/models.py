"""
Tickets component input/output models.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any
from uuid import UUID

from maintrack.domain.entities import Ticket, TicketStatus
from maintrack.domain.validation import FieldError

TicketValidationError = FieldError

# --- Input Models ---


@dataclass(frozen=True)
class CreateTicketInput:
    """Input for opening a support ticket. ``data`` holds Ticket fields."""

    data: dict[str, Any]


@dataclass(frozen=True)
class ListTicketsInput:
    status: TicketStatus | None = None


@dataclass(frozen=True)
class GetTicketInput:
    ticket_id: UUID


@dataclass(frozen=True)
class UpdateTicketInput:
    ticket_id: UUID
    updates: dict[str, Any]


@dataclass(frozen=True)
class DeleteTicketInput:
    ticket_id: UUID


# --- Output Models ---


@dataclass(frozen=True)
class TicketOutput:
    ticket: Ticket | None = None
    errors: list[TicketValidationError] = field(default_factory=list)
    success: bool = True


@dataclass(frozen=True)
class TicketListOutput:
    items: list[Ticket]
    total: int
