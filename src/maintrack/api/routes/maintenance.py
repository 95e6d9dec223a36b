"""
Maintenance history and AI suggestion routes.

Equipment and peripherals expose the same endpoints, so the router is
built once per asset kind and mounted under each asset prefix.
"""

from collections.abc import Callable
from typing import Any
from uuid import UUID

from fastapi import APIRouter, Depends, Query, status

from maintrack.adapters.clock import SystemClock
from maintrack.adapters.sqlite.repos import SQLiteMaintenanceRepo
from maintrack.api.deps import (
    get_clock,
    get_equipment_repo,
    get_maintenance_repo,
    get_peripheral_repo,
    get_rules,
    get_suggester,
    require_permission,
)
from maintrack.api.errors import raise_for_errors
from maintrack.api.schemas import (
    MaintenanceCreateRequest,
    MaintenanceHistoryResponse,
    MaintenanceRecordResponse,
    MaintenanceUpdateRequest,
    MaintenanceWriteResponse,
    ScheduleResponse,
    SuggestionResponse,
)
from maintrack.components.maintenance import (
    DeleteRecordInput,
    GetRecordInput,
    HistoryInput,
    MaintenanceRecordOutput,
    RecordMaintenanceInput,
    UpdateRecordInput,
    run_delete_record,
    run_get_record,
    run_history,
    run_record,
    run_update_record,
)
from maintrack.components.suggestions import SuggesterPort, SuggestInput, run_suggest
from maintrack.domain.entities import AssetKind, User
from maintrack.rules.models import Rules


def _write_response(result: MaintenanceRecordOutput) -> MaintenanceWriteResponse:
    return MaintenanceWriteResponse(
        record=MaintenanceRecordResponse.model_validate(result.record),
        schedule=ScheduleResponse.model_validate(result.asset),
    )


def build_maintenance_router(
    asset_kind: AssetKind, asset_repo_dep: Callable[..., Any]
) -> APIRouter:
    router = APIRouter()

    @router.get("/{asset_id}/maintenance", response_model=MaintenanceHistoryResponse)
    def list_history(
        asset_id: str,
        limit: int | None = Query(default=None, ge=1),
        _: User = Depends(require_permission("maintenance:read")),
        repo: SQLiteMaintenanceRepo = Depends(get_maintenance_repo),
        assets: Any = Depends(asset_repo_dep),
    ) -> MaintenanceHistoryResponse:
        """Maintenance history, newest first."""
        result = run_history(
            HistoryInput(asset_kind=asset_kind, asset_id=asset_id, limit=limit),
            repo=repo,
            assets=assets,
        )
        if not result.success:
            raise_for_errors(result.errors)
        return MaintenanceHistoryResponse(
            records=[MaintenanceRecordResponse.model_validate(r) for r in result.records],
            total=result.total,
        )

    @router.post(
        "/{asset_id}/maintenance",
        response_model=MaintenanceWriteResponse,
        status_code=status.HTTP_201_CREATED,
    )
    def record_maintenance(
        asset_id: str,
        req: MaintenanceCreateRequest,
        _: User = Depends(require_permission("maintenance:write")),
        repo: SQLiteMaintenanceRepo = Depends(get_maintenance_repo),
        assets: Any = Depends(asset_repo_dep),
        clock: SystemClock = Depends(get_clock),
        rules: Rules = Depends(get_rules),
    ) -> MaintenanceWriteResponse:
        result = run_record(
            RecordMaintenanceInput(
                asset_kind=asset_kind,
                asset_id=asset_id,
                date=req.date or "",
                technician=req.technician or "",
                description=req.description or "",
                kind=req.kind,
                images=req.images,
            ),
            repo=repo,
            assets=assets,
            time=clock,
            rules=rules.maintenance,
        )
        if not result.success:
            raise_for_errors(result.errors)
        return _write_response(result)

    @router.get(
        "/{asset_id}/maintenance/{record_id}", response_model=MaintenanceRecordResponse
    )
    def get_record(
        asset_id: str,
        record_id: UUID,
        _: User = Depends(require_permission("maintenance:read")),
        repo: SQLiteMaintenanceRepo = Depends(get_maintenance_repo),
    ) -> MaintenanceRecordResponse:
        result = run_get_record(
            GetRecordInput(asset_kind=asset_kind, asset_id=asset_id, record_id=record_id),
            repo=repo,
        )
        if not result.success:
            raise_for_errors(result.errors)
        return result.record  # type: ignore

    @router.put(
        "/{asset_id}/maintenance/{record_id}", response_model=MaintenanceWriteResponse
    )
    def update_record(
        asset_id: str,
        record_id: UUID,
        req: MaintenanceUpdateRequest,
        _: User = Depends(require_permission("maintenance:write")),
        repo: SQLiteMaintenanceRepo = Depends(get_maintenance_repo),
        assets: Any = Depends(asset_repo_dep),
        clock: SystemClock = Depends(get_clock),
        rules: Rules = Depends(get_rules),
    ) -> MaintenanceWriteResponse:
        result = run_update_record(
            UpdateRecordInput(
                asset_kind=asset_kind,
                asset_id=asset_id,
                record_id=record_id,
                updates=req.model_dump(exclude_unset=True),
            ),
            repo=repo,
            assets=assets,
            time=clock,
            rules=rules.maintenance,
        )
        if not result.success:
            raise_for_errors(result.errors)
        return _write_response(result)

    @router.delete(
        "/{asset_id}/maintenance/{record_id}", status_code=status.HTTP_204_NO_CONTENT
    )
    def delete_record(
        asset_id: str,
        record_id: UUID,
        _: User = Depends(require_permission("maintenance:write")),
        repo: SQLiteMaintenanceRepo = Depends(get_maintenance_repo),
        assets: Any = Depends(asset_repo_dep),
        clock: SystemClock = Depends(get_clock),
        rules: Rules = Depends(get_rules),
    ) -> None:
        result = run_delete_record(
            DeleteRecordInput(asset_kind=asset_kind, asset_id=asset_id, record_id=record_id),
            repo=repo,
            assets=assets,
            time=clock,
            rules=rules.maintenance,
        )
        if not result.success:
            raise_for_errors(result.errors)

    @router.post("/{asset_id}/suggestions", response_model=SuggestionResponse)
    async def suggest_procedures(
        asset_id: str,
        _: User = Depends(require_permission("suggestions:read")),
        repo: SQLiteMaintenanceRepo = Depends(get_maintenance_repo),
        assets: Any = Depends(asset_repo_dep),
        suggester: SuggesterPort = Depends(get_suggester),
        rules: Rules = Depends(get_rules),
    ) -> SuggestionResponse:
        """Ask the language model for maintenance procedures for this asset."""
        result = await run_suggest(
            SuggestInput(asset_kind=asset_kind, asset_id=asset_id),
            assets=assets,
            history=repo,
            suggester=suggester,
            rules=rules.suggestions,
        )
        if not result.success:
            raise_for_errors(result.errors)
        return SuggestionResponse.model_validate(result)

    return router


equipment_router = build_maintenance_router("equipment", get_equipment_repo)
peripheral_router = build_maintenance_router("peripheral", get_peripheral_repo)
