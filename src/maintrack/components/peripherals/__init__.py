"""
Peripherals component - Printers, scanners and other non-computer devices.
"""

from .component import run_create, run_delete, run_get, run_list, run_update
from .models import (
    CreatePeripheralInput,
    DeletePeripheralInput,
    GetPeripheralInput,
    PeripheralListOutput,
    PeripheralOutput,
    PeripheralValidationError,
    UpdatePeripheralInput,
)
from .ports import MaintenanceCleanupPort, PeripheralRepoPort, TimePort

__all__ = [
    "run_create",
    "run_delete",
    "run_get",
    "run_list",
    "run_update",
    "CreatePeripheralInput",
    "DeletePeripheralInput",
    "GetPeripheralInput",
    "PeripheralListOutput",
    "PeripheralOutput",
    "PeripheralValidationError",
    "UpdatePeripheralInput",
    "MaintenanceCleanupPort",
    "PeripheralRepoPort",
    "TimePort",
]
