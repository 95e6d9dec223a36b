"""
Maintenance component - Preventive and corrective maintenance records.
"""

from ._impl import add_months, apply_schedule, latest_preventive, sort_newest_first
from .component import (
    run_delete_record,
    run_get_record,
    run_history,
    run_record,
    run_update_record,
)
from .models import (
    DeleteRecordInput,
    GetRecordInput,
    HistoryInput,
    MaintenanceHistoryOutput,
    MaintenanceRecordOutput,
    MaintenanceValidationError,
    RecordMaintenanceInput,
    UpdateRecordInput,
)
from .ports import AssetRepoPort, MaintenanceRepoPort, TimePort

__all__ = [
    # Entry points
    "run_delete_record",
    "run_get_record",
    "run_history",
    "run_record",
    "run_update_record",
    # Schedule helpers
    "add_months",
    "apply_schedule",
    "latest_preventive",
    "sort_newest_first",
    # Models
    "DeleteRecordInput",
    "GetRecordInput",
    "HistoryInput",
    "MaintenanceHistoryOutput",
    "MaintenanceRecordOutput",
    "MaintenanceValidationError",
    "RecordMaintenanceInput",
    "UpdateRecordInput",
    # Ports
    "AssetRepoPort",
    "MaintenanceRepoPort",
    "TimePort",
]
