"""
Tickets component - Support requests raised against a computer.

A ticket copies the computer's id, name and inventory data at the time it
is opened, so it stays readable after the computer is edited or removed.
"""

from __future__ import annotations

import logging

from pydantic import ValidationError

from maintrack.domain.entities import Ticket
from maintrack.domain.validation import (
    FieldError,
    check_required,
    errors_from_pydantic,
    strip_strings,
)

from .models import (
    CreateTicketInput,
    DeleteTicketInput,
    GetTicketInput,
    ListTicketsInput,
    TicketListOutput,
    TicketOutput,
    UpdateTicketInput,
)
from .ports import TicketRepoPort, TimePort

logger = logging.getLogger(__name__)

REQUIRED_FIELDS = (
    "pc_id",
    "pc_name",
    "user_name",
    "date",
    "assigned_engineer",
    "maintenance_type",
    "problem_description",
    "actions_taken",
)
IMMUTABLE_FIELDS = {"id", "created_at", "updated_at"}
VALID_STATUSES = ("open", "in_progress", "closed")


def _check_status(data: dict) -> list[FieldError]:
    status = data.get("status")
    if status is not None and status not in VALID_STATUSES:
        return [
            FieldError(
                code="status_invalid",
                message=f"Status must be one of: {', '.join(VALID_STATUSES)}",
                field="status",
            )
        ]
    return []


def _not_found(ticket_id: object) -> TicketOutput:
    return TicketOutput(
        errors=[FieldError(code="not_found", message=f"Ticket {ticket_id} not found")],
        success=False,
    )


def run_create(
    inp: CreateTicketInput,
    *,
    repo: TicketRepoPort,
    time: TimePort,
) -> TicketOutput:
    """Open a ticket. New tickets always start as ``open``."""
    data = strip_strings({k: v for k, v in inp.data.items() if k not in IMMUTABLE_FIELDS})
    data["status"] = "open"

    errors = check_required(data, REQUIRED_FIELDS)
    if errors:
        return TicketOutput(errors=errors, success=False)

    now = time.now_utc()
    try:
        ticket = Ticket.model_validate({**data, "created_at": now, "updated_at": now})
    except ValidationError as e:
        return TicketOutput(errors=errors_from_pydantic(e), success=False)

    saved = repo.save(ticket)
    logger.info("Ticket %s opened for %s (%s)", saved.id, saved.pc_id, saved.maintenance_type)
    return TicketOutput(ticket=saved)


def run_list(inp: ListTicketsInput, *, repo: TicketRepoPort) -> TicketListOutput:
    items = repo.list(status=inp.status)
    return TicketListOutput(items=items, total=len(items))


def run_get(inp: GetTicketInput, *, repo: TicketRepoPort) -> TicketOutput:
    ticket = repo.get_by_id(inp.ticket_id)
    if ticket is None:
        return _not_found(inp.ticket_id)
    return TicketOutput(ticket=ticket)


def run_update(
    inp: UpdateTicketInput,
    *,
    repo: TicketRepoPort,
    time: TimePort,
) -> TicketOutput:
    """Partial update; closing a ticket is an update of ``status``."""
    existing = repo.get_by_id(inp.ticket_id)
    if existing is None:
        return _not_found(inp.ticket_id)

    updates = strip_strings({k: v for k, v in inp.updates.items() if k not in IMMUTABLE_FIELDS})
    merged = {**existing.model_dump(), **updates}

    errors = check_required(merged, REQUIRED_FIELDS)
    errors.extend(_check_status(merged))
    if merged.get("status") is None:
        errors.append(FieldError(code="status_required", message="Status is required", field="status"))
    if errors:
        return TicketOutput(ticket=existing, errors=errors, success=False)

    merged["updated_at"] = time.now_utc()
    try:
        ticket = Ticket.model_validate(merged)
    except ValidationError as e:
        return TicketOutput(ticket=existing, errors=errors_from_pydantic(e), success=False)

    saved = repo.save(ticket)
    if saved.status != existing.status:
        logger.info("Ticket %s status: %s -> %s", saved.id, existing.status, saved.status)
    return TicketOutput(ticket=saved)


def run_delete(inp: DeleteTicketInput, *, repo: TicketRepoPort) -> TicketOutput:
    existing = repo.get_by_id(inp.ticket_id)
    if existing is None:
        return _not_found(inp.ticket_id)

    repo.delete(inp.ticket_id)
    logger.info("Ticket deleted: %s", inp.ticket_id)
    return TicketOutput(ticket=existing)
