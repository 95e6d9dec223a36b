from __future__ import annotations

from datetime import datetime
from typing import Protocol

from maintrack.domain.entities import AssetKind, Peripheral


class PeripheralRepoPort(Protocol):
    def get_by_id(self, peripheral_id: str) -> Peripheral | None: ...
    def list_all(self) -> list[Peripheral]: ...
    def save(self, item: Peripheral) -> Peripheral: ...
    def delete(self, peripheral_id: str) -> None: ...


class MaintenanceCleanupPort(Protocol):
    def delete_for_asset(self, asset_kind: AssetKind, asset_id: str) -> int: ...


class TimePort(Protocol):
    def now_utc(self) -> datetime: ...
