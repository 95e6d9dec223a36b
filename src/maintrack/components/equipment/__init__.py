"""
Equipment component - Registration and editing of tracked computers.
"""

from .component import run_create, run_delete, run_get, run_list, run_update
from .models import (
    CreateEquipmentInput,
    DeleteEquipmentInput,
    EquipmentListOutput,
    EquipmentOutput,
    EquipmentValidationError,
    GetEquipmentInput,
    UpdateEquipmentInput,
)
from .ports import EquipmentRepoPort, MaintenanceCleanupPort, TimePort

__all__ = [
    "run_create",
    "run_delete",
    "run_get",
    "run_list",
    "run_update",
    "CreateEquipmentInput",
    "DeleteEquipmentInput",
    "EquipmentListOutput",
    "EquipmentOutput",
    "EquipmentValidationError",
    "GetEquipmentInput",
    "UpdateEquipmentInput",
    "EquipmentRepoPort",
    "MaintenanceCleanupPort",
    "TimePort",
]
