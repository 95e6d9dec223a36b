"""Dashboard routes: alerts, counters and chart data."""

from fastapi import APIRouter, Depends, Query

from maintrack.adapters.clock import SystemClock
from maintrack.adapters.sqlite.repos import (
    SQLiteEquipmentRepo,
    SQLiteMaintenanceRepo,
    SQLitePeripheralRepo,
    SQLiteTicketRepo,
)
from maintrack.api.deps import (
    get_clock,
    get_equipment_repo,
    get_maintenance_repo,
    get_peripheral_repo,
    get_rules,
    get_ticket_repo,
    require_permission,
)
from maintrack.api.schemas import AlertResponse, MonthlyCountResponse, SummaryResponse
from maintrack.components.dashboard import (
    AlertsInput,
    MonthlyCountsInput,
    SummaryInput,
    run_alerts,
    run_monthly_counts,
    run_summary,
)
from maintrack.domain.entities import User
from maintrack.rules.models import Rules

router = APIRouter()


@router.get("/alerts", response_model=list[AlertResponse])
def get_alerts(
    _: User = Depends(require_permission("dashboard:read")),
    tickets: SQLiteTicketRepo = Depends(get_ticket_repo),
    equipment: SQLiteEquipmentRepo = Depends(get_equipment_repo),
    peripherals: SQLitePeripheralRepo = Depends(get_peripheral_repo),
    clock: SystemClock = Depends(get_clock),
    rules: Rules = Depends(get_rules),
) -> list[AlertResponse]:
    result = run_alerts(
        AlertsInput(today=clock.today()),
        tickets=tickets,
        equipment=equipment,
        peripherals=peripherals,
        rules=rules.dashboard,
    )
    return [AlertResponse.model_validate(a) for a in result.alerts]


@router.get("/summary", response_model=SummaryResponse)
def get_summary(
    _: User = Depends(require_permission("dashboard:read")),
    tickets: SQLiteTicketRepo = Depends(get_ticket_repo),
    equipment: SQLiteEquipmentRepo = Depends(get_equipment_repo),
    peripherals: SQLitePeripheralRepo = Depends(get_peripheral_repo),
    clock: SystemClock = Depends(get_clock),
    rules: Rules = Depends(get_rules),
) -> SummaryResponse:
    result = run_summary(
        SummaryInput(today=clock.today()),
        tickets=tickets,
        equipment=equipment,
        peripherals=peripherals,
        rules=rules.dashboard,
    )
    return SummaryResponse.model_validate(result)


@router.get("/monthly-counts", response_model=list[MonthlyCountResponse])
def get_monthly_counts(
    year: int | None = Query(default=None, ge=1900, le=9998),
    _: User = Depends(require_permission("dashboard:read")),
    maintenance: SQLiteMaintenanceRepo = Depends(get_maintenance_repo),
    clock: SystemClock = Depends(get_clock),
) -> list[MonthlyCountResponse]:
    """Per-month record counts for ``year`` (default: the current year)."""
    result = run_monthly_counts(
        MonthlyCountsInput(year=year or clock.today().year), maintenance=maintenance
    )
    return [MonthlyCountResponse.model_validate(row) for row in result.rows]
