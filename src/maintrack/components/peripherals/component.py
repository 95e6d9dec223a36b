"""
Peripherals component - Printers, scanners and other non-computer devices.

Mirrors the equipment component: user-assigned ids, partial updates,
and deletion that takes the maintenance history with it.
"""

from __future__ import annotations

import logging
from typing import Any

from pydantic import ValidationError

from maintrack.domain.entities import Peripheral
from maintrack.domain.validation import (
    FieldError,
    check_max_lengths,
    check_required,
    errors_from_pydantic,
    strip_strings,
)
from maintrack.rules.models import AssetFieldRules

from .models import (
    CreatePeripheralInput,
    DeletePeripheralInput,
    GetPeripheralInput,
    PeripheralListOutput,
    PeripheralOutput,
    UpdatePeripheralInput,
)
from .ports import MaintenanceCleanupPort, PeripheralRepoPort, TimePort

logger = logging.getLogger(__name__)

REQUIRED_FIELDS = ("id", "name", "type", "common_failure_points")
IMMUTABLE_FIELDS = {"id", "created_at", "updated_at"}
SCHEDULE_FIELDS = {"last_maintenance_date", "last_technician", "next_maintenance_date"}
DEFAULT_STATUS = "operational"


def _validate(data: dict[str, Any], limits: AssetFieldRules) -> list[FieldError]:
    errors = check_required(data, REQUIRED_FIELDS)
    errors.extend(
        check_max_lengths(
            data,
            {
                "id": limits.id_max_length,
                "name": limits.name_max_length,
                "type": limits.type_max_length,
                "common_failure_points": limits.failure_points_max_length,
            },
        )
    )
    return errors


def _not_found(peripheral_id: str) -> PeripheralOutput:
    return PeripheralOutput(
        errors=[FieldError(code="not_found", message=f"Peripheral {peripheral_id} not found")],
        success=False,
    )


def run_list(*, repo: PeripheralRepoPort) -> PeripheralListOutput:
    items = repo.list_all()
    return PeripheralListOutput(items=items, total=len(items))


def run_get(inp: GetPeripheralInput, *, repo: PeripheralRepoPort) -> PeripheralOutput:
    item = repo.get_by_id(inp.peripheral_id)
    if item is None:
        return _not_found(inp.peripheral_id)
    return PeripheralOutput(peripheral=item)


def run_create(
    inp: CreatePeripheralInput,
    *,
    repo: PeripheralRepoPort,
    time: TimePort,
    limits: AssetFieldRules,
) -> PeripheralOutput:
    data = strip_strings(
        {
            k: v
            for k, v in inp.data.items()
            if k not in SCHEDULE_FIELDS | {"created_at", "updated_at"}
        }
    )
    if data.get("status") is None:
        data["status"] = DEFAULT_STATUS

    errors = _validate(data, limits)
    if errors:
        return PeripheralOutput(errors=errors, success=False)

    if repo.get_by_id(data["id"]) is not None:
        return PeripheralOutput(
            errors=[
                FieldError(
                    code="id_exists",
                    message=f"Peripheral with ID {data['id']} already exists",
                    field="id",
                )
            ],
            success=False,
        )

    now = time.now_utc()
    try:
        item = Peripheral.model_validate({**data, "created_at": now, "updated_at": now})
    except ValidationError as e:
        return PeripheralOutput(errors=errors_from_pydantic(e), success=False)

    saved = repo.save(item)
    logger.info("Peripheral registered: %s (%s)", saved.id, saved.name)
    return PeripheralOutput(peripheral=saved)


def run_update(
    inp: UpdatePeripheralInput,
    *,
    repo: PeripheralRepoPort,
    time: TimePort,
    limits: AssetFieldRules,
) -> PeripheralOutput:
    existing = repo.get_by_id(inp.peripheral_id)
    if existing is None:
        return _not_found(inp.peripheral_id)

    updates = strip_strings({k: v for k, v in inp.updates.items() if k not in IMMUTABLE_FIELDS})
    merged = {**existing.model_dump(), **updates}
    if merged.get("status") is None:
        merged["status"] = DEFAULT_STATUS

    errors = _validate(merged, limits)
    if errors:
        return PeripheralOutput(peripheral=existing, errors=errors, success=False)

    merged["updated_at"] = time.now_utc()
    try:
        item = Peripheral.model_validate(merged)
    except ValidationError as e:
        return PeripheralOutput(
            peripheral=existing, errors=errors_from_pydantic(e), success=False
        )

    saved = repo.save(item)
    logger.info("Peripheral updated: %s", saved.id)
    return PeripheralOutput(peripheral=saved)


def run_delete(
    inp: DeletePeripheralInput,
    *,
    repo: PeripheralRepoPort,
    maintenance: MaintenanceCleanupPort,
) -> PeripheralOutput:
    existing = repo.get_by_id(inp.peripheral_id)
    if existing is None:
        return _not_found(inp.peripheral_id)

    removed = maintenance.delete_for_asset("peripheral", inp.peripheral_id)
    repo.delete(inp.peripheral_id)
    logger.info(
        "Peripheral deleted: %s (%d maintenance records removed)", inp.peripheral_id, removed
    )
    return PeripheralOutput(peripheral=existing)
