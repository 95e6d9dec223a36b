"""Routes for printers, scanners and other peripherals."""

from fastapi import APIRouter, Depends, status

from maintrack.adapters.clock import SystemClock
from maintrack.adapters.sqlite.repos import SQLiteMaintenanceRepo, SQLitePeripheralRepo
from maintrack.api.deps import (
    get_clock,
    get_maintenance_repo,
    get_peripheral_repo,
    get_rules,
    require_permission,
)
from maintrack.api.errors import raise_for_errors
from maintrack.api.schemas import (
    PeripheralCreateRequest,
    PeripheralResponse,
    PeripheralUpdateRequest,
)
from maintrack.components.peripherals import (
    CreatePeripheralInput,
    DeletePeripheralInput,
    GetPeripheralInput,
    UpdatePeripheralInput,
    run_create,
    run_delete,
    run_get,
    run_list,
    run_update,
)
from maintrack.domain.entities import User
from maintrack.rules.models import Rules

router = APIRouter()


@router.get("", response_model=list[PeripheralResponse])
def list_peripherals(
    _: User = Depends(require_permission("peripherals:read")),
    repo: SQLitePeripheralRepo = Depends(get_peripheral_repo),
) -> list[PeripheralResponse]:
    return run_list(repo=repo).items  # type: ignore


@router.post("", response_model=PeripheralResponse, status_code=status.HTTP_201_CREATED)
def create_peripheral(
    req: PeripheralCreateRequest,
    _: User = Depends(require_permission("peripherals:write")),
    repo: SQLitePeripheralRepo = Depends(get_peripheral_repo),
    clock: SystemClock = Depends(get_clock),
    rules: Rules = Depends(get_rules),
) -> PeripheralResponse:
    result = run_create(
        CreatePeripheralInput(data=req.model_dump(exclude_unset=True)),
        repo=repo,
        time=clock,
        limits=rules.assets,
    )
    if not result.success:
        raise_for_errors(result.errors)
    return result.peripheral  # type: ignore


@router.get("/{peripheral_id}", response_model=PeripheralResponse)
def get_peripheral(
    peripheral_id: str,
    _: User = Depends(require_permission("peripherals:read")),
    repo: SQLitePeripheralRepo = Depends(get_peripheral_repo),
) -> PeripheralResponse:
    result = run_get(GetPeripheralInput(peripheral_id=peripheral_id), repo=repo)
    if not result.success:
        raise_for_errors(result.errors)
    return result.peripheral  # type: ignore


@router.put("/{peripheral_id}", response_model=PeripheralResponse)
def update_peripheral(
    peripheral_id: str,
    req: PeripheralUpdateRequest,
    _: User = Depends(require_permission("peripherals:write")),
    repo: SQLitePeripheralRepo = Depends(get_peripheral_repo),
    clock: SystemClock = Depends(get_clock),
    rules: Rules = Depends(get_rules),
) -> PeripheralResponse:
    result = run_update(
        UpdatePeripheralInput(
            peripheral_id=peripheral_id, updates=req.model_dump(exclude_unset=True)
        ),
        repo=repo,
        time=clock,
        limits=rules.assets,
    )
    if not result.success:
        raise_for_errors(result.errors)
    return result.peripheral  # type: ignore


@router.delete("/{peripheral_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_peripheral(
    peripheral_id: str,
    _: User = Depends(require_permission("peripherals:write")),
    repo: SQLitePeripheralRepo = Depends(get_peripheral_repo),
    maintenance_repo: SQLiteMaintenanceRepo = Depends(get_maintenance_repo),
) -> None:
    """Delete a peripheral and its maintenance history."""
    result = run_delete(
        DeletePeripheralInput(peripheral_id=peripheral_id),
        repo=repo,
        maintenance=maintenance_repo,
    )
    if not result.success:
        raise_for_errors(result.errors)
