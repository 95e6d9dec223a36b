"""
Preventive schedule calculation.

Functional Core - pure functions, no I/O.
"""

from __future__ import annotations

import calendar
from collections.abc import Iterable
from datetime import date, datetime
from typing import TypeVar

from maintrack.domain.entities import Equipment, MaintenanceRecord, Peripheral

AssetT = TypeVar("AssetT", Equipment, Peripheral)


def add_months(d: date, months: int) -> date:
    """Shift a date by whole months, clamping the day to the target month's length."""
    month_index = d.month - 1 + months
    year = d.year + month_index // 12
    month = month_index % 12 + 1
    day = min(d.day, calendar.monthrange(year, month)[1])
    return date(year, month, day)


def sort_newest_first(records: Iterable[MaintenanceRecord]) -> list[MaintenanceRecord]:
    return sorted(records, key=lambda r: (r.date, r.created_at), reverse=True)


def latest_preventive(records: Iterable[MaintenanceRecord]) -> MaintenanceRecord | None:
    preventive = [r for r in records if r.kind == "preventive"]
    if not preventive:
        return None
    return sort_newest_first(preventive)[0]


def apply_schedule(
    asset: AssetT,
    records: Iterable[MaintenanceRecord],
    interval_months: int,
    now: datetime,
) -> tuple[AssetT, bool]:
    """
    Derive the preventive schedule from the latest preventive record.

    Returns (asset, changed). With no preventive records left the schedule
    is cleared.
    """
    latest = latest_preventive(records)
    if latest is None:
        schedule = {
            "last_maintenance_date": None,
            "last_technician": None,
            "next_maintenance_date": None,
        }
    else:
        schedule = {
            "last_maintenance_date": latest.date,
            "last_technician": latest.technician,
            "next_maintenance_date": add_months(latest.date, interval_months),
        }

    changed = any(getattr(asset, key) != value for key, value in schedule.items())
    if not changed:
        return asset, False
    return asset.model_copy(update={**schedule, "updated_at": now}), True
