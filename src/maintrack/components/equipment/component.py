"""
Equipment component - Registration and editing of tracked computers.

The equipment id is the inventory tag chosen by the user (e.g. "CPU001"),
so creation rejects duplicates instead of generating ids. The preventive
schedule fields start empty and are normally maintained by the
maintenance component.
"""

from __future__ import annotations

import logging
from typing import Any

from pydantic import ValidationError

from maintrack.domain.entities import Equipment
from maintrack.domain.validation import (
    FieldError,
    check_ip_address,
    check_max_lengths,
    check_required,
    errors_from_pydantic,
    strip_strings,
)
from maintrack.rules.models import AssetFieldRules

from .models import (
    CreateEquipmentInput,
    DeleteEquipmentInput,
    EquipmentListOutput,
    EquipmentOutput,
    GetEquipmentInput,
    UpdateEquipmentInput,
)
from .ports import EquipmentRepoPort, MaintenanceCleanupPort, TimePort

logger = logging.getLogger(__name__)

REQUIRED_FIELDS = ("id", "name", "os", "type", "common_failure_points")
IMMUTABLE_FIELDS = {"id", "created_at", "updated_at"}
DEPRECATED_FIELDS = {"specifications"}
SCHEDULE_FIELDS = {"last_maintenance_date", "last_technician", "next_maintenance_date"}


def _length_limits(limits: AssetFieldRules) -> dict[str, int]:
    return {
        "id": limits.id_max_length,
        "name": limits.name_max_length,
        "os": limits.os_max_length,
        "type": limits.type_max_length,
        "common_failure_points": limits.failure_points_max_length,
    }


def _validate(data: dict[str, Any], limits: AssetFieldRules) -> list[FieldError]:
    errors = check_required(data, REQUIRED_FIELDS)
    errors.extend(check_max_lengths(data, _length_limits(limits)))
    errors.extend(check_ip_address(data))
    return errors


def _not_found(equipment_id: str) -> EquipmentOutput:
    return EquipmentOutput(
        equipment=None,
        errors=[FieldError(code="not_found", message=f"Equipment {equipment_id} not found")],
        success=False,
    )


def run_list(*, repo: EquipmentRepoPort) -> EquipmentListOutput:
    items = repo.list_all()
    return EquipmentListOutput(items=items, total=len(items))


def run_get(inp: GetEquipmentInput, *, repo: EquipmentRepoPort) -> EquipmentOutput:
    item = repo.get_by_id(inp.equipment_id)
    if item is None:
        return _not_found(inp.equipment_id)
    return EquipmentOutput(equipment=item)


def run_create(
    inp: CreateEquipmentInput,
    *,
    repo: EquipmentRepoPort,
    time: TimePort,
    limits: AssetFieldRules,
) -> EquipmentOutput:
    """
    Register a new computer.

    Schedule fields in the input are ignored; a fresh computer has no
    maintenance history.
    """
    data = strip_strings(
        {
            k: v
            for k, v in inp.data.items()
            if k not in DEPRECATED_FIELDS | SCHEDULE_FIELDS | {"created_at", "updated_at"}
        }
    )

    errors = _validate(data, limits)
    if errors:
        return EquipmentOutput(errors=errors, success=False)

    if repo.get_by_id(data["id"]) is not None:
        return EquipmentOutput(
            errors=[
                FieldError(
                    code="id_exists",
                    message=f"Equipment with ID {data['id']} already exists",
                    field="id",
                )
            ],
            success=False,
        )

    now = time.now_utc()
    try:
        item = Equipment.model_validate({**data, "created_at": now, "updated_at": now})
    except ValidationError as e:
        return EquipmentOutput(errors=errors_from_pydantic(e), success=False)

    saved = repo.save(item)
    logger.info("Equipment registered: %s (%s)", saved.id, saved.name)
    return EquipmentOutput(equipment=saved)


def run_update(
    inp: UpdateEquipmentInput,
    *,
    repo: EquipmentRepoPort,
    time: TimePort,
    limits: AssetFieldRules,
) -> EquipmentOutput:
    """
    Apply a partial update.

    The id cannot change. Blank strings clear optional fields, which is how
    a client resets the maintenance dates.
    """
    existing = repo.get_by_id(inp.equipment_id)
    if existing is None:
        return _not_found(inp.equipment_id)

    updates = strip_strings(
        {
            k: v
            for k, v in inp.updates.items()
            if k not in IMMUTABLE_FIELDS and k not in DEPRECATED_FIELDS
        }
    )

    merged = {**existing.model_dump(), **updates}
    errors = _validate(merged, limits)
    if errors:
        return EquipmentOutput(equipment=existing, errors=errors, success=False)

    merged["updated_at"] = time.now_utc()
    try:
        item = Equipment.model_validate(merged)
    except ValidationError as e:
        return EquipmentOutput(equipment=existing, errors=errors_from_pydantic(e), success=False)

    saved = repo.save(item)
    logger.info("Equipment updated: %s (%s)", saved.id, ", ".join(sorted(updates)) or "no changes")
    return EquipmentOutput(equipment=saved)


def run_delete(
    inp: DeleteEquipmentInput,
    *,
    repo: EquipmentRepoPort,
    maintenance: MaintenanceCleanupPort,
) -> EquipmentOutput:
    """Delete a computer together with its maintenance history."""
    existing = repo.get_by_id(inp.equipment_id)
    if existing is None:
        return _not_found(inp.equipment_id)

    removed = maintenance.delete_for_asset("equipment", inp.equipment_id)
    repo.delete(inp.equipment_id)
    logger.info("Equipment deleted: %s (%d maintenance records removed)", inp.equipment_id, removed)
    return EquipmentOutput(equipment=existing)
