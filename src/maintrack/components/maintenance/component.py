"""
Maintenance component - Preventive and corrective maintenance records.

Records belong to one asset (equipment or peripheral). Whenever a
preventive record is added, edited or removed, the asset's schedule is
re-derived from its latest preventive record:

- last_maintenance_date = record date
- last_technician = record technician
- next_maintenance_date = record date + preventive_interval_months

Corrective records never move the schedule.
"""

from __future__ import annotations

import logging
from typing import Any

from pydantic import ValidationError

from maintrack.domain.entities import AssetKind, MaintenanceRecord
from maintrack.domain.validation import (
    FieldError,
    check_required,
    errors_from_pydantic,
    strip_strings,
)
from maintrack.rules.models import MaintenanceRules

from ._impl import apply_schedule, sort_newest_first
from .models import (
    DeleteRecordInput,
    GetRecordInput,
    HistoryInput,
    MaintenanceHistoryOutput,
    MaintenanceRecordOutput,
    RecordMaintenanceInput,
    UpdateRecordInput,
)
from .ports import Asset, AssetRepoPort, MaintenanceRepoPort, TimePort

logger = logging.getLogger(__name__)

REQUIRED_FIELDS = ("date", "technician", "description")
EDITABLE_FIELDS = {"date", "technician", "description", "kind", "images"}


def _asset_not_found(asset_kind: AssetKind, asset_id: str) -> list[FieldError]:
    label = "Equipment" if asset_kind == "equipment" else "Peripheral"
    return [FieldError(code="not_found", message=f"{label} {asset_id} not found")]


def _record_not_found(record_id: object) -> list[FieldError]:
    return [FieldError(code="not_found", message=f"Maintenance record {record_id} not found")]


def _normalize_images(images: list[Any]) -> list[dict[str, str]]:
    """Accept plain URLs or {"url": ...} mappings."""
    return [{"url": img} if isinstance(img, str) else dict(img) for img in images or []]


def _find_record(
    asset_kind: AssetKind, asset_id: str, record_id: object, repo: MaintenanceRepoPort
) -> MaintenanceRecord | None:
    record = repo.get_by_id(record_id)  # type: ignore[arg-type]
    if record is None or record.asset_kind != asset_kind or record.asset_id != asset_id:
        return None
    return record


def _sync_schedule(
    asset: Asset,
    asset_kind: AssetKind,
    *,
    repo: MaintenanceRepoPort,
    assets: AssetRepoPort,
    time: TimePort,
    rules: MaintenanceRules,
) -> Asset:
    records = repo.list_for_asset(asset_kind, asset.id)
    updated, changed = apply_schedule(
        asset, records, rules.preventive_interval_months, time.now_utc()
    )
    if changed:
        assets.save(updated)
        logger.info(
            "Schedule updated for %s %s: last=%s next=%s",
            asset_kind,
            asset.id,
            updated.last_maintenance_date,
            updated.next_maintenance_date,
        )
    return updated


def run_record(
    inp: RecordMaintenanceInput,
    *,
    repo: MaintenanceRepoPort,
    assets: AssetRepoPort,
    time: TimePort,
    rules: MaintenanceRules,
) -> MaintenanceRecordOutput:
    """
    Log maintenance performed on an asset.

    Args:
        inp: Record fields plus the target asset.
        repo: Maintenance record repository.
        assets: Repository for the asset kind in ``inp.asset_kind``.
        time: Time port for timestamps.
        rules: Maintenance rules (preventive interval).

    Returns:
        MaintenanceRecordOutput with the new record and the (possibly rescheduled) asset.
    """
    asset = assets.get_by_id(inp.asset_id)
    if asset is None:
        return MaintenanceRecordOutput(
            errors=_asset_not_found(inp.asset_kind, inp.asset_id), success=False
        )

    data = strip_strings(
        {
            "date": inp.date,
            "technician": inp.technician,
            "description": inp.description,
            "kind": inp.kind,
        }
    )
    errors = check_required(data, REQUIRED_FIELDS)
    if errors:
        return MaintenanceRecordOutput(asset=asset, errors=errors, success=False)

    now = time.now_utc()
    try:
        record = MaintenanceRecord.model_validate(
            {
                **data,
                "asset_kind": inp.asset_kind,
                "asset_id": inp.asset_id,
                "images": _normalize_images(inp.images),
                "created_at": now,
                "updated_at": now,
            }
        )
    except ValidationError as e:
        return MaintenanceRecordOutput(asset=asset, errors=errors_from_pydantic(e), success=False)

    saved = repo.save(record)
    logger.info(
        "%s maintenance recorded for %s %s on %s",
        saved.kind.capitalize(),
        inp.asset_kind,
        inp.asset_id,
        saved.date,
    )

    if saved.kind == "preventive":
        asset = _sync_schedule(
            asset, inp.asset_kind, repo=repo, assets=assets, time=time, rules=rules
        )

    return MaintenanceRecordOutput(record=saved, asset=asset)


def run_history(
    inp: HistoryInput,
    *,
    repo: MaintenanceRepoPort,
    assets: AssetRepoPort,
) -> MaintenanceHistoryOutput:
    """Maintenance history for an asset, newest first."""
    if assets.get_by_id(inp.asset_id) is None:
        return MaintenanceHistoryOutput(
            errors=_asset_not_found(inp.asset_kind, inp.asset_id), success=False
        )

    records = sort_newest_first(repo.list_for_asset(inp.asset_kind, inp.asset_id))
    total = len(records)
    if inp.limit is not None:
        records = records[: max(inp.limit, 0)]
    return MaintenanceHistoryOutput(records=records, total=total)


def run_get_record(
    inp: GetRecordInput,
    *,
    repo: MaintenanceRepoPort,
) -> MaintenanceRecordOutput:
    record = _find_record(inp.asset_kind, inp.asset_id, inp.record_id, repo)
    if record is None:
        return MaintenanceRecordOutput(errors=_record_not_found(inp.record_id), success=False)
    return MaintenanceRecordOutput(record=record)


def run_update_record(
    inp: UpdateRecordInput,
    *,
    repo: MaintenanceRepoPort,
    assets: AssetRepoPort,
    time: TimePort,
    rules: MaintenanceRules,
) -> MaintenanceRecordOutput:
    asset = assets.get_by_id(inp.asset_id)
    if asset is None:
        return MaintenanceRecordOutput(
            errors=_asset_not_found(inp.asset_kind, inp.asset_id), success=False
        )

    record = _find_record(inp.asset_kind, inp.asset_id, inp.record_id, repo)
    if record is None:
        return MaintenanceRecordOutput(
            asset=asset, errors=_record_not_found(inp.record_id), success=False
        )

    updates = strip_strings({k: v for k, v in inp.updates.items() if k in EDITABLE_FIELDS})
    if "images" in updates:
        updates["images"] = _normalize_images(updates["images"])

    merged = {**record.model_dump(), **updates}
    errors = check_required(merged, REQUIRED_FIELDS)
    if errors:
        return MaintenanceRecordOutput(record=record, asset=asset, errors=errors, success=False)

    merged["updated_at"] = time.now_utc()
    try:
        updated = MaintenanceRecord.model_validate(merged)
    except ValidationError as e:
        return MaintenanceRecordOutput(
            record=record, asset=asset, errors=errors_from_pydantic(e), success=False
        )

    saved = repo.save(updated)
    if "preventive" in (record.kind, saved.kind):
        asset = _sync_schedule(
            asset, inp.asset_kind, repo=repo, assets=assets, time=time, rules=rules
        )

    return MaintenanceRecordOutput(record=saved, asset=asset)


def run_delete_record(
    inp: DeleteRecordInput,
    *,
    repo: MaintenanceRepoPort,
    assets: AssetRepoPort,
    time: TimePort,
    rules: MaintenanceRules,
) -> MaintenanceRecordOutput:
    asset = assets.get_by_id(inp.asset_id)
    if asset is None:
        return MaintenanceRecordOutput(
            errors=_asset_not_found(inp.asset_kind, inp.asset_id), success=False
        )

    record = _find_record(inp.asset_kind, inp.asset_id, inp.record_id, repo)
    if record is None:
        return MaintenanceRecordOutput(
            asset=asset, errors=_record_not_found(inp.record_id), success=False
        )

    repo.delete(record.id)
    logger.info("Maintenance record %s deleted from %s %s", record.id, inp.asset_kind, inp.asset_id)

    if record.kind == "preventive":
        asset = _sync_schedule(
            asset, inp.asset_kind, repo=repo, assets=assets, time=time, rules=rules
        )

    return MaintenanceRecordOutput(record=record, asset=asset)
