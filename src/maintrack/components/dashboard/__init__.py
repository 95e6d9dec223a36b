"""
Dashboard component - Alerts, summary counters and the monthly chart data.
"""

from .component import run_alerts, run_monthly_counts, run_summary
from .models import (
    Alert,
    AlertsInput,
    AlertsOutput,
    MonthlyCount,
    MonthlyCountsInput,
    MonthlyCountsOutput,
    SummaryInput,
    SummaryOutput,
)
from .ports import EquipmentListPort, MaintenanceRangePort, PeripheralListPort, TicketListPort

__all__ = [
    "run_alerts",
    "run_monthly_counts",
    "run_summary",
    "Alert",
    "AlertsInput",
    "AlertsOutput",
    "MonthlyCount",
    "MonthlyCountsInput",
    "MonthlyCountsOutput",
    "SummaryInput",
    "SummaryOutput",
    "EquipmentListPort",
    "MaintenanceRangePort",
    "PeripheralListPort",
    "TicketListPort",
]
