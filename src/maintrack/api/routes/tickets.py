"""Routes for support tickets."""

from uuid import UUID

from fastapi import APIRouter, Depends, Query, status

from maintrack.adapters.clock import SystemClock
from maintrack.adapters.sqlite.repos import SQLiteTicketRepo
from maintrack.api.deps import get_clock, get_ticket_repo, require_permission
from maintrack.api.errors import raise_for_errors
from maintrack.api.schemas import (
    TicketCreateRequest,
    TicketResponse,
    TicketStatus,
    TicketUpdateRequest,
)
from maintrack.components.tickets import (
    CreateTicketInput,
    DeleteTicketInput,
    GetTicketInput,
    ListTicketsInput,
    UpdateTicketInput,
    run_create,
    run_delete,
    run_get,
    run_list,
    run_update,
)
from maintrack.domain.entities import User

router = APIRouter()


@router.get("", response_model=list[TicketResponse])
def list_tickets(
    status_filter: TicketStatus | None = Query(default=None, alias="status"),
    _: User = Depends(require_permission("tickets:read")),
    repo: SQLiteTicketRepo = Depends(get_ticket_repo),
) -> list[TicketResponse]:
    """Tickets, newest first, optionally filtered by status."""
    return run_list(ListTicketsInput(status=status_filter), repo=repo).items  # type: ignore


@router.post("", response_model=TicketResponse, status_code=status.HTTP_201_CREATED)
def create_ticket(
    req: TicketCreateRequest,
    _: User = Depends(require_permission("tickets:write")),
    repo: SQLiteTicketRepo = Depends(get_ticket_repo),
    clock: SystemClock = Depends(get_clock),
) -> TicketResponse:
    result = run_create(
        CreateTicketInput(data=req.model_dump(exclude_unset=True)), repo=repo, time=clock
    )
    if not result.success:
        raise_for_errors(result.errors)
    return result.ticket  # type: ignore


@router.get("/{ticket_id}", response_model=TicketResponse)
def get_ticket(
    ticket_id: UUID,
    _: User = Depends(require_permission("tickets:read")),
    repo: SQLiteTicketRepo = Depends(get_ticket_repo),
) -> TicketResponse:
    result = run_get(GetTicketInput(ticket_id=ticket_id), repo=repo)
    if not result.success:
        raise_for_errors(result.errors)
    return result.ticket  # type: ignore


@router.put("/{ticket_id}", response_model=TicketResponse)
def update_ticket(
    ticket_id: UUID,
    req: TicketUpdateRequest,
    _: User = Depends(require_permission("tickets:write")),
    repo: SQLiteTicketRepo = Depends(get_ticket_repo),
    clock: SystemClock = Depends(get_clock),
) -> TicketResponse:
    result = run_update(
        UpdateTicketInput(ticket_id=ticket_id, updates=req.model_dump(exclude_unset=True)),
        repo=repo,
        time=clock,
    )
    if not result.success:
        raise_for_errors(result.errors)
    return result.ticket  # type: ignore


@router.delete("/{ticket_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_ticket(
    ticket_id: UUID,
    _: User = Depends(require_permission("tickets:write")),
    repo: SQLiteTicketRepo = Depends(get_ticket_repo),
) -> None:
    result = run_delete(DeleteTicketInput(ticket_id=ticket_id), repo=repo)
    if not result.success:
        raise_for_errors(result.errors)
