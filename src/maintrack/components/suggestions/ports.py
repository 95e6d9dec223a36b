"""
Suggestions component port definitions.
"""

from __future__ import annotations

from typing import Protocol

from maintrack.domain.entities import AssetKind, Equipment, MaintenanceRecord, Peripheral


class SuggesterPort(Protocol):
    """Text completion backend (hosted model or the offline dev suggester)."""

    async def complete(self, prompt: str) -> str: ...


class AssetReaderPort(Protocol):
    def get_by_id(self, asset_id: str) -> Equipment | Peripheral | None: ...


class HistoryPort(Protocol):
    def list_for_asset(self, asset_kind: AssetKind, asset_id: str) -> list[MaintenanceRecord]: ...
