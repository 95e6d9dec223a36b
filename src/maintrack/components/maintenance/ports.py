"""
Maintenance component port definitions.
"""

from __future__ import annotations

from datetime import datetime
from typing import Protocol
from uuid import UUID

from maintrack.domain.entities import AssetKind, Equipment, MaintenanceRecord, Peripheral

Asset = Equipment | Peripheral


class MaintenanceRepoPort(Protocol):
    def save(self, record: MaintenanceRecord) -> MaintenanceRecord: ...

    def get_by_id(self, record_id: UUID) -> MaintenanceRecord | None: ...

    def list_for_asset(self, asset_kind: AssetKind, asset_id: str) -> list[MaintenanceRecord]:
        """Records for one asset, newest first."""
        ...

    def delete(self, record_id: UUID) -> None: ...


class AssetRepoPort(Protocol):
    """Equipment or peripheral repository; both expose the same two calls."""

    def get_by_id(self, asset_id: str) -> Asset | None: ...

    def save(self, item: Asset) -> Asset: ...


class TimePort(Protocol):
    def now_utc(self) -> datetime: ...
