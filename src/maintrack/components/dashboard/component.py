"""
Dashboard component - Alerts, summary counters and the monthly chart data.
"""

from __future__ import annotations

from datetime import date

from maintrack.rules.models import DashboardRules

from ._aggregate import monthly_counts, schedule_alerts, ticket_alerts
from .models import (
    AlertsInput,
    AlertsOutput,
    MonthlyCountsInput,
    MonthlyCountsOutput,
    SummaryInput,
    SummaryOutput,
)
from .ports import EquipmentListPort, MaintenanceRangePort, PeripheralListPort, TicketListPort


def run_alerts(
    inp: AlertsInput,
    *,
    tickets: TicketListPort,
    equipment: EquipmentListPort,
    peripherals: PeripheralListPort,
    rules: DashboardRules,
) -> AlertsOutput:
    """
    Open-ticket alerts followed by overdue and upcoming preventive maintenance.

    Schedule alerts are skipped when ``include_maintenance_alerts`` is off.
    """
    alerts = ticket_alerts(tickets.list(status="open"))
    if rules.include_maintenance_alerts:
        alerts.extend(
            schedule_alerts(
                equipment.list_all(),
                peripherals.list_all(),
                inp.today,
                rules.upcoming_window_days,
            )
        )
    return AlertsOutput(alerts=alerts)


def run_monthly_counts(
    inp: MonthlyCountsInput,
    *,
    maintenance: MaintenanceRangePort,
) -> MonthlyCountsOutput:
    records = maintenance.list_in_range(date(inp.year, 1, 1), date(inp.year + 1, 1, 1))
    return MonthlyCountsOutput(year=inp.year, rows=monthly_counts(records, inp.year))


def run_summary(
    inp: SummaryInput,
    *,
    tickets: TicketListPort,
    equipment: EquipmentListPort,
    peripherals: PeripheralListPort,
    rules: DashboardRules,
) -> SummaryOutput:
    equipment_items = equipment.list_all()
    peripheral_items = peripherals.list_all()
    due = schedule_alerts(
        equipment_items, peripheral_items, inp.today, rules.upcoming_window_days
    )
    return SummaryOutput(
        equipment_count=len(equipment_items),
        peripheral_count=len(peripheral_items),
        open_tickets=len(tickets.list(status="open")),
        overdue_assets=sum(1 for a in due if a.kind == "overdue"),
        upcoming_assets=sum(1 for a in due if a.kind == "upcoming"),
    )
