"""
Dashboard component input/output models.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from typing import Literal
from uuid import UUID

from maintrack.domain.entities import AssetKind

AlertKind = Literal["ticket", "overdue", "upcoming"]

# --- Input Models ---


@dataclass(frozen=True)
class AlertsInput:
    today: date


@dataclass(frozen=True)
class MonthlyCountsInput:
    year: int


@dataclass(frozen=True)
class SummaryInput:
    today: date


# --- Output Models ---


@dataclass(frozen=True)
class Alert:
    """One dashboard alert: an open ticket or an asset due for preventive work."""

    kind: AlertKind
    message: str
    ticket_id: UUID | None = None
    asset_kind: AssetKind | None = None
    asset_id: str | None = None
    due_date: date | None = None


@dataclass(frozen=True)
class AlertsOutput:
    alerts: list[Alert] = field(default_factory=list)


@dataclass(frozen=True)
class MonthlyCount:
    month: int
    label: str
    preventive: int = 0
    corrective: int = 0
    peripherals: int = 0


@dataclass(frozen=True)
class MonthlyCountsOutput:
    year: int
    rows: list[MonthlyCount]


@dataclass(frozen=True)
class SummaryOutput:
    equipment_count: int
    peripheral_count: int
    open_tickets: int
    overdue_assets: int
    upcoming_assets: int
