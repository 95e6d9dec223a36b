"""
Dashboard aggregation.

Functional Core - pure functions, no I/O.
"""

from __future__ import annotations

import calendar
from collections.abc import Iterable
from datetime import date, timedelta

from maintrack.domain.entities import Equipment, MaintenanceRecord, Peripheral, Ticket

from .models import Alert, MonthlyCount


def ticket_alerts(tickets: Iterable[Ticket]) -> list[Alert]:
    return [
        Alert(
            kind="ticket",
            message=f"Pending {t.maintenance_type} maintenance for {t.pc_name}",
            ticket_id=t.id,
            asset_kind="equipment",
            asset_id=t.pc_id,
        )
        for t in tickets
        if t.status == "open"
    ]


def schedule_alerts(
    equipment: Iterable[Equipment],
    peripherals: Iterable[Peripheral],
    today: date,
    window_days: int,
) -> list[Alert]:
    """Overdue assets first (oldest due date first), then upcoming ones."""
    horizon = today + timedelta(days=window_days)
    overdue: list[Alert] = []
    upcoming: list[Alert] = []

    assets = [("equipment", e) for e in equipment] + [("peripheral", p) for p in peripherals]
    for asset_kind, asset in assets:
        due = asset.next_maintenance_date
        if due is None:
            continue
        if due < today:
            overdue.append(
                Alert(
                    kind="overdue",
                    message=f"Preventive maintenance overdue for {asset.name} (due {due.isoformat()})",
                    asset_kind=asset_kind,
                    asset_id=asset.id,
                    due_date=due,
                )
            )
        elif due <= horizon:
            upcoming.append(
                Alert(
                    kind="upcoming",
                    message=f"Preventive maintenance due for {asset.name} on {due.isoformat()}",
                    asset_kind=asset_kind,
                    asset_id=asset.id,
                    due_date=due,
                )
            )

    overdue.sort(key=lambda a: (a.due_date, a.asset_id))
    upcoming.sort(key=lambda a: (a.due_date, a.asset_id))
    return overdue + upcoming


def monthly_counts(records: Iterable[MaintenanceRecord], year: int) -> list[MonthlyCount]:
    """
    Twelve rows, January first.

    preventive/corrective count equipment records; peripherals counts every
    peripheral record regardless of kind.
    """
    counts = {m: {"preventive": 0, "corrective": 0, "peripherals": 0} for m in range(1, 13)}
    for r in records:
        if r.date.year != year:
            continue
        bucket = counts[r.date.month]
        if r.asset_kind == "peripheral":
            bucket["peripherals"] += 1
        else:
            bucket[r.kind] += 1

    return [
        MonthlyCount(month=m, label=calendar.month_abbr[m], **counts[m]) for m in range(1, 13)
    ]
