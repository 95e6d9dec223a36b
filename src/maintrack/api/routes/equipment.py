"""Routes for tracked computers."""

from fastapi import APIRouter, Depends, status

from maintrack.adapters.clock import SystemClock
from maintrack.adapters.sqlite.repos import SQLiteEquipmentRepo, SQLiteMaintenanceRepo
from maintrack.api.deps import (
    get_clock,
    get_equipment_repo,
    get_maintenance_repo,
    get_rules,
    require_permission,
)
from maintrack.api.errors import raise_for_errors
from maintrack.api.schemas import (
    EquipmentCreateRequest,
    EquipmentResponse,
    EquipmentUpdateRequest,
)
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
from maintrack.domain.entities import User
from maintrack.rules.models import Rules

router = APIRouter()


@router.get("", response_model=list[EquipmentResponse])
def list_equipment(
    _: User = Depends(require_permission("equipment:read")),
    repo: SQLiteEquipmentRepo = Depends(get_equipment_repo),
) -> list[EquipmentResponse]:
    return run_list(repo=repo).items  # type: ignore


@router.post("", response_model=EquipmentResponse, status_code=status.HTTP_201_CREATED)
def create_equipment(
    req: EquipmentCreateRequest,
    _: User = Depends(require_permission("equipment:write")),
    repo: SQLiteEquipmentRepo = Depends(get_equipment_repo),
    clock: SystemClock = Depends(get_clock),
    rules: Rules = Depends(get_rules),
) -> EquipmentResponse:
    result = run_create(
        CreateEquipmentInput(data=req.model_dump(exclude_unset=True)),
        repo=repo,
        time=clock,
        limits=rules.assets,
    )
    if not result.success:
        raise_for_errors(result.errors)
    return result.equipment  # type: ignore


@router.get("/{equipment_id}", response_model=EquipmentResponse)
def get_equipment(
    equipment_id: str,
    _: User = Depends(require_permission("equipment:read")),
    repo: SQLiteEquipmentRepo = Depends(get_equipment_repo),
) -> EquipmentResponse:
    result = run_get(GetEquipmentInput(equipment_id=equipment_id), repo=repo)
    if not result.success:
        raise_for_errors(result.errors)
    return result.equipment  # type: ignore


@router.put("/{equipment_id}", response_model=EquipmentResponse)
def update_equipment(
    equipment_id: str,
    req: EquipmentUpdateRequest,
    _: User = Depends(require_permission("equipment:write")),
    repo: SQLiteEquipmentRepo = Depends(get_equipment_repo),
    clock: SystemClock = Depends(get_clock),
    rules: Rules = Depends(get_rules),
) -> EquipmentResponse:
    result = run_update(
        UpdateEquipmentInput(
            equipment_id=equipment_id, updates=req.model_dump(exclude_unset=True)
        ),
        repo=repo,
        time=clock,
        limits=rules.assets,
    )
    if not result.success:
        raise_for_errors(result.errors)
    return result.equipment  # type: ignore


@router.delete("/{equipment_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_equipment(
    equipment_id: str,
    _: User = Depends(require_permission("equipment:write")),
    repo: SQLiteEquipmentRepo = Depends(get_equipment_repo),
    maintenance_repo: SQLiteMaintenanceRepo = Depends(get_maintenance_repo),
) -> None:
    """Delete a computer and its maintenance history."""
    result = run_delete(
        DeleteEquipmentInput(equipment_id=equipment_id),
        repo=repo,
        maintenance=maintenance_repo,
    )
    if not result.success:
        raise_for_errors(result.errors)
