"""
Equipment component unit tests.
"""

from __future__ import annotations

from datetime import UTC, date, datetime

import pytest

from maintrack.components.equipment import (
    CreateEquipmentInput,
    DeleteEquipmentInput,
    GetEquipmentInput,
    UpdateEquipmentInput,
    run_create,
    run_delete,
    run_get,
    run_list,
    run_update,
)
from maintrack.domain.entities import Equipment
from maintrack.rules.models import AssetFieldRules

# --- Mocks ---


class MockEquipmentRepo:
    def __init__(self) -> None:
        self._items: dict[str, Equipment] = {}

    def get_by_id(self, equipment_id: str) -> Equipment | None:
        return self._items.get(equipment_id)

    def list_all(self) -> list[Equipment]:
        return [self._items[k] for k in sorted(self._items)]

    def save(self, item: Equipment) -> Equipment:
        self._items[item.id] = item
        return item

    def delete(self, equipment_id: str) -> None:
        self._items.pop(equipment_id, None)


class MockMaintenanceCleanup:
    def __init__(self) -> None:
        self.calls: list[tuple[str, str]] = []

    def delete_for_asset(self, asset_kind: str, asset_id: str) -> int:
        self.calls.append((asset_kind, asset_id))
        return 2


class MockTimePort:
    def __init__(self) -> None:
        self._time = datetime(2024, 6, 15, 12, 0, 0, tzinfo=UTC)

    def now_utc(self) -> datetime:
        return self._time


@pytest.fixture
def repo() -> MockEquipmentRepo:
    return MockEquipmentRepo()


@pytest.fixture
def clock() -> MockTimePort:
    return MockTimePort()


@pytest.fixture
def limits() -> AssetFieldRules:
    return AssetFieldRules()


def _valid_data(**overrides: object) -> dict[str, object]:
    data: dict[str, object] = {
        "id": "CPU001",
        "name": "Accounting-PC01",
        "os": "Windows 10 Pro",
        "type": "Desktop CPU",
        "common_failure_points": "Power supply, Hard drive",
    }
    data.update(overrides)
    return data


@pytest.fixture
def existing(repo: MockEquipmentRepo, clock: MockTimePort, limits: AssetFieldRules) -> Equipment:
    result = run_create(
        CreateEquipmentInput(data=_valid_data()), repo=repo, time=clock, limits=limits
    )
    assert result.equipment is not None
    return result.equipment


# --- Create ---


class TestCreateEquipment:
    def test_create_success(
        self, repo: MockEquipmentRepo, clock: MockTimePort, limits: AssetFieldRules
    ) -> None:
        data = _valid_data(
            ip_address="192.168.1.20",
            mouse={"patrimonial_id": "M-01", "brand": "Logitech", "model": "M90"},
        )
        result = run_create(CreateEquipmentInput(data=data), repo=repo, time=clock, limits=limits)

        assert result.success is True
        assert result.errors == []
        assert result.equipment is not None
        assert result.equipment.mouse is not None
        assert result.equipment.mouse.brand == "Logitech"
        assert result.equipment.created_at == clock.now_utc()
        assert repo.get_by_id("CPU001") is not None

    def test_create_ignores_schedule_and_specifications(
        self, repo: MockEquipmentRepo, clock: MockTimePort, limits: AssetFieldRules
    ) -> None:
        data = _valid_data(
            last_maintenance_date="2024-01-15",
            next_maintenance_date="2024-07-15",
            specifications="Intel Core i5, 8GB RAM",
        )
        result = run_create(CreateEquipmentInput(data=data), repo=repo, time=clock, limits=limits)

        assert result.success is True
        assert result.equipment is not None
        assert result.equipment.last_maintenance_date is None
        assert result.equipment.next_maintenance_date is None

    def test_create_missing_required_fields(
        self, repo: MockEquipmentRepo, clock: MockTimePort, limits: AssetFieldRules
    ) -> None:
        data = _valid_data(name="  ", os=None)
        result = run_create(CreateEquipmentInput(data=data), repo=repo, time=clock, limits=limits)

        assert result.success is False
        codes = {e.code for e in result.errors}
        assert codes == {"name_required", "os_required"}
        assert repo.list_all() == []

    def test_create_too_long_id(
        self, repo: MockEquipmentRepo, clock: MockTimePort, limits: AssetFieldRules
    ) -> None:
        data = _valid_data(id="X" * 21)
        result = run_create(CreateEquipmentInput(data=data), repo=repo, time=clock, limits=limits)

        assert result.success is False
        assert result.errors[0].code == "id_too_long"
        assert result.errors[0].field == "id"

    def test_create_invalid_ip(
        self, repo: MockEquipmentRepo, clock: MockTimePort, limits: AssetFieldRules
    ) -> None:
        data = _valid_data(ip_address="300.1.1.1")
        result = run_create(CreateEquipmentInput(data=data), repo=repo, time=clock, limits=limits)

        assert result.success is False
        assert result.errors[0].code == "ip_invalid"

    def test_create_duplicate_id(
        self,
        existing: Equipment,
        repo: MockEquipmentRepo,
        clock: MockTimePort,
        limits: AssetFieldRules,
    ) -> None:
        result = run_create(
            CreateEquipmentInput(data=_valid_data(name="Other")),
            repo=repo,
            time=clock,
            limits=limits,
        )

        assert result.success is False
        assert result.errors[0].code == "id_exists"
        stored = repo.get_by_id("CPU001")
        assert stored is not None
        assert stored.name == "Accounting-PC01"


# --- Read ---


class TestReadEquipment:
    def test_get_existing(self, existing: Equipment, repo: MockEquipmentRepo) -> None:
        result = run_get(GetEquipmentInput(equipment_id="CPU001"), repo=repo)
        assert result.success is True
        assert result.equipment == existing

    def test_get_missing(self, repo: MockEquipmentRepo) -> None:
        result = run_get(GetEquipmentInput(equipment_id="NOPE"), repo=repo)
        assert result.success is False
        assert result.errors[0].code == "not_found"

    def test_list_ordered_by_id(
        self, repo: MockEquipmentRepo, clock: MockTimePort, limits: AssetFieldRules
    ) -> None:
        for eid in ("LAP001", "CPU002", "CPU001"):
            run_create(
                CreateEquipmentInput(data=_valid_data(id=eid)),
                repo=repo,
                time=clock,
                limits=limits,
            )
        result = run_list(repo=repo)
        assert result.total == 3
        assert [e.id for e in result.items] == ["CPU001", "CPU002", "LAP001"]


# --- Update ---


class TestUpdateEquipment:
    def test_partial_update(
        self,
        existing: Equipment,
        repo: MockEquipmentRepo,
        clock: MockTimePort,
        limits: AssetFieldRules,
    ) -> None:
        result = run_update(
            UpdateEquipmentInput(equipment_id="CPU001", updates={"os": "Windows 11 Pro"}),
            repo=repo,
            time=clock,
            limits=limits,
        )

        assert result.success is True
        assert result.equipment is not None
        assert result.equipment.os == "Windows 11 Pro"
        assert result.equipment.name == "Accounting-PC01"

    def test_id_is_immutable(
        self,
        existing: Equipment,
        repo: MockEquipmentRepo,
        clock: MockTimePort,
        limits: AssetFieldRules,
    ) -> None:
        result = run_update(
            UpdateEquipmentInput(equipment_id="CPU001", updates={"id": "CPU999"}),
            repo=repo,
            time=clock,
            limits=limits,
        )

        assert result.success is True
        assert result.equipment is not None
        assert result.equipment.id == "CPU001"
        assert repo.get_by_id("CPU999") is None

    def test_blank_dates_become_null(
        self,
        existing: Equipment,
        repo: MockEquipmentRepo,
        clock: MockTimePort,
        limits: AssetFieldRules,
    ) -> None:
        repo.save(
            existing.model_copy(
                update={
                    "last_maintenance_date": date(2024, 1, 15),
                    "next_maintenance_date": date(2024, 7, 15),
                }
            )
        )
        result = run_update(
            UpdateEquipmentInput(
                equipment_id="CPU001",
                updates={"last_maintenance_date": "", "next_maintenance_date": ""},
            ),
            repo=repo,
            time=clock,
            limits=limits,
        )

        assert result.success is True
        assert result.equipment is not None
        assert result.equipment.last_maintenance_date is None
        assert result.equipment.next_maintenance_date is None

    def test_deprecated_specifications_dropped(
        self,
        existing: Equipment,
        repo: MockEquipmentRepo,
        clock: MockTimePort,
        limits: AssetFieldRules,
    ) -> None:
        result = run_update(
            UpdateEquipmentInput(
                equipment_id="CPU001", updates={"specifications": "i5, 8GB", "ram_amount": "8GB"}
            ),
            repo=repo,
            time=clock,
            limits=limits,
        )

        assert result.success is True
        assert result.equipment is not None
        assert result.equipment.ram_amount == "8GB"
        assert not hasattr(result.equipment, "specifications")

    def test_clearing_required_field_fails(
        self,
        existing: Equipment,
        repo: MockEquipmentRepo,
        clock: MockTimePort,
        limits: AssetFieldRules,
    ) -> None:
        result = run_update(
            UpdateEquipmentInput(equipment_id="CPU001", updates={"name": ""}),
            repo=repo,
            time=clock,
            limits=limits,
        )

        assert result.success is False
        assert result.errors[0].code == "name_required"
        assert result.equipment == existing

    def test_update_missing(
        self, repo: MockEquipmentRepo, clock: MockTimePort, limits: AssetFieldRules
    ) -> None:
        result = run_update(
            UpdateEquipmentInput(equipment_id="NOPE", updates={"os": "Linux"}),
            repo=repo,
            time=clock,
            limits=limits,
        )
        assert result.success is False
        assert result.errors[0].code == "not_found"


# --- Delete ---


class TestDeleteEquipment:
    def test_delete_cascades_to_records(
        self, existing: Equipment, repo: MockEquipmentRepo
    ) -> None:
        cleanup = MockMaintenanceCleanup()
        result = run_delete(
            DeleteEquipmentInput(equipment_id="CPU001"), repo=repo, maintenance=cleanup
        )

        assert result.success is True
        assert repo.get_by_id("CPU001") is None
        assert cleanup.calls == [("equipment", "CPU001")]

    def test_delete_missing(self, repo: MockEquipmentRepo) -> None:
        cleanup = MockMaintenanceCleanup()
        result = run_delete(
            DeleteEquipmentInput(equipment_id="NOPE"), repo=repo, maintenance=cleanup
        )

        assert result.success is False
        assert result.errors[0].code == "not_found"
        assert cleanup.calls == []
