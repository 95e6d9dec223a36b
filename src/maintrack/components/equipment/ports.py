"""
Equipment component port definitions.
"""

from __future__ import annotations

from datetime import datetime
from typing import Protocol

from maintrack.domain.entities import AssetKind, Equipment


class EquipmentRepoPort(Protocol):
    """Repository interface for equipment persistence."""

    def get_by_id(self, equipment_id: str) -> Equipment | None: ...

    def list_all(self) -> list[Equipment]:
        """All equipment ordered by id."""
        ...

    def save(self, item: Equipment) -> Equipment: ...

    def delete(self, equipment_id: str) -> None: ...


class MaintenanceCleanupPort(Protocol):
    """Removes an asset's maintenance history when the asset is deleted."""

    def delete_for_asset(self, asset_kind: AssetKind, asset_id: str) -> int: ...


class TimePort(Protocol):
    def now_utc(self) -> datetime: ...
