"""
Maintenance component input/output models.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from typing import Any
from uuid import UUID

from maintrack.domain.entities import (
    AssetKind,
    Equipment,
    MaintenanceKind,
    MaintenanceRecord,
    Peripheral,
)
from maintrack.domain.validation import FieldError

MaintenanceValidationError = FieldError

# --- Input Models ---


@dataclass(frozen=True)
class RecordMaintenanceInput:
    """Input for logging work performed on an asset."""

    asset_kind: AssetKind
    asset_id: str
    date: date | str
    technician: str
    description: str
    kind: MaintenanceKind = "preventive"
    images: list[str] = field(default_factory=list)


@dataclass(frozen=True)
class HistoryInput:
    asset_kind: AssetKind
    asset_id: str
    limit: int | None = None


@dataclass(frozen=True)
class GetRecordInput:
    asset_kind: AssetKind
    asset_id: str
    record_id: UUID


@dataclass(frozen=True)
class UpdateRecordInput:
    asset_kind: AssetKind
    asset_id: str
    record_id: UUID
    updates: dict[str, Any]


@dataclass(frozen=True)
class DeleteRecordInput:
    asset_kind: AssetKind
    asset_id: str
    record_id: UUID


# --- Output Models ---


@dataclass(frozen=True)
class MaintenanceRecordOutput:
    """Output for single-record operations. ``asset`` is the asset after any schedule sync."""

    record: MaintenanceRecord | None = None
    asset: Equipment | Peripheral | None = None
    errors: list[MaintenanceValidationError] = field(default_factory=list)
    success: bool = True


@dataclass(frozen=True)
class MaintenanceHistoryOutput:
    records: list[MaintenanceRecord] = field(default_factory=list)
    total: int = 0
    errors: list[MaintenanceValidationError] = field(default_factory=list)
    success: bool = True
