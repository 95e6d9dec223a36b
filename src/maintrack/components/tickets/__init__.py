"""
Tickets component - Support requests raised against a computer.
"""

from .component import run_create, run_delete, run_get, run_list, run_update
from .models import (
    CreateTicketInput,
    DeleteTicketInput,
    GetTicketInput,
    ListTicketsInput,
    TicketListOutput,
    TicketOutput,
    TicketValidationError,
    UpdateTicketInput,
)
from .ports import TicketRepoPort, TimePort

__all__ = [
    "run_create",
    "run_delete",
    "run_get",
    "run_list",
    "run_update",
    "CreateTicketInput",
    "DeleteTicketInput",
    "GetTicketInput",
    "ListTicketsInput",
    "TicketListOutput",
    "TicketOutput",
    "TicketValidationError",
    "UpdateTicketInput",
    "TicketRepoPort",
    "TimePort",
]
