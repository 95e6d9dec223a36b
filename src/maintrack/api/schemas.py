from datetime import date, datetime
from typing import Any, Literal
from uuid import UUID

from pydantic import BaseModel, ConfigDict

# --- Shared Enums/Types ---
MaintenanceKind = Literal["preventive", "corrective"]
TicketStatus = Literal["open", "in_progress", "closed"]


# --- Auth / Users ---
class Token(BaseModel):
    access_token: str
    token_type: str


class SignupRequest(BaseModel):
    email: str
    password: str
    display_name: str | None = None


class UserResponse(BaseModel):
    id: UUID
    email: str
    display_name: str | None = None
    roles: list[str] = []
    status: str
    created_at: datetime

    model_config = ConfigDict(from_attributes=True)


class UserCreateRequest(BaseModel):
    email: str
    display_name: str | None = None
    password: str
    roles: list[str] = ["technician"]


class UserUpdateRequest(BaseModel):
    roles: list[str] | None = None
    status: str | None = None  # "active", "disabled"


# --- Assets ---
class AttachedDeviceModel(BaseModel):
    patrimonial_id: str | None = None
    brand: str | None = None
    model: str | None = None

    model_config = ConfigDict(from_attributes=True)


class EquipmentFields(BaseModel):
    """Every field is optional at the HTTP layer; the component reports missing ones."""

    name: str | None = None
    os: str | None = None
    type: str | None = None
    common_failure_points: str | None = None
    processor: str | None = None
    ram_amount: str | None = None
    ram_type: str | None = None
    storage_capacity: str | None = None
    storage_type: str | None = None
    ip_address: str | None = None
    user_name: str | None = None
    patrimonial_id: str | None = None
    mouse: AttachedDeviceModel | None = None
    monitor: AttachedDeviceModel | None = None
    regulator: AttachedDeviceModel | None = None
    keyboard: AttachedDeviceModel | None = None
    pc_status: str | None = None
    reusable_parts: str | None = None


class EquipmentCreateRequest(EquipmentFields):
    id: str | None = None


class EquipmentUpdateRequest(EquipmentFields):
    # Blank strings clear the schedule
    last_maintenance_date: date | str | None = None
    last_technician: str | None = None
    next_maintenance_date: date | str | None = None
    specifications: Any = None  # deprecated, ignored


class EquipmentResponse(BaseModel):
    id: str
    name: str
    os: str
    type: str
    common_failure_points: str
    processor: str | None = None
    ram_amount: str | None = None
    ram_type: str | None = None
    storage_capacity: str | None = None
    storage_type: str | None = None
    ip_address: str | None = None
    user_name: str | None = None
    patrimonial_id: str | None = None
    mouse: AttachedDeviceModel | None = None
    monitor: AttachedDeviceModel | None = None
    regulator: AttachedDeviceModel | None = None
    keyboard: AttachedDeviceModel | None = None
    pc_status: str | None = None
    reusable_parts: str | None = None
    last_maintenance_date: date | None = None
    last_technician: str | None = None
    next_maintenance_date: date | None = None
    created_at: datetime
    updated_at: datetime

    model_config = ConfigDict(from_attributes=True)


class PeripheralFields(BaseModel):
    name: str | None = None
    type: str | None = None
    common_failure_points: str | None = None
    patrimonial_id: str | None = None
    brand: str | None = None
    model: str | None = None
    location: str | None = None
    status: str | None = None


class PeripheralCreateRequest(PeripheralFields):
    id: str | None = None


class PeripheralUpdateRequest(PeripheralFields):
    last_maintenance_date: date | str | None = None
    last_technician: str | None = None
    next_maintenance_date: date | str | None = None


class PeripheralResponse(BaseModel):
    id: str
    name: str
    type: str
    common_failure_points: str
    patrimonial_id: str | None = None
    brand: str | None = None
    model: str | None = None
    location: str | None = None
    status: str
    last_maintenance_date: date | None = None
    last_technician: str | None = None
    next_maintenance_date: date | None = None
    created_at: datetime
    updated_at: datetime

    model_config = ConfigDict(from_attributes=True)


# --- Maintenance ---
class MaintenanceCreateRequest(BaseModel):
    date: str | None = None
    technician: str | None = None
    description: str | None = None
    kind: MaintenanceKind = "preventive"
    images: list[str] = []


class MaintenanceUpdateRequest(BaseModel):
    date: str | None = None
    technician: str | None = None
    description: str | None = None
    kind: MaintenanceKind | None = None
    images: list[str] | None = None


class MaintenanceImageModel(BaseModel):
    url: str

    model_config = ConfigDict(from_attributes=True)


class MaintenanceRecordResponse(BaseModel):
    id: UUID
    asset_kind: str
    asset_id: str
    kind: MaintenanceKind
    date: date
    technician: str
    description: str
    images: list[MaintenanceImageModel] = []
    created_at: datetime
    updated_at: datetime

    model_config = ConfigDict(from_attributes=True)


class ScheduleResponse(BaseModel):
    last_maintenance_date: date | None = None
    last_technician: str | None = None
    next_maintenance_date: date | None = None

    model_config = ConfigDict(from_attributes=True)


class MaintenanceWriteResponse(BaseModel):
    """A written record together with the asset's schedule after the write."""

    record: MaintenanceRecordResponse
    schedule: ScheduleResponse


class MaintenanceHistoryResponse(BaseModel):
    records: list[MaintenanceRecordResponse]
    total: int


class SuggestionResponse(BaseModel):
    procedures: list[str]
    raw_text: str
    fallback: bool

    model_config = ConfigDict(from_attributes=True)


# --- Tickets ---
class TicketCreateRequest(BaseModel):
    pc_id: str | None = None
    pc_name: str | None = None
    user_name: str | None = None
    patrimonial_id: str | None = None
    brand: str | None = None
    model: str | None = None
    date: str | None = None
    assigned_engineer: str | None = None
    maintenance_type: MaintenanceKind | None = None
    problem_description: str | None = None
    actions_taken: str | None = None


class TicketUpdateRequest(TicketCreateRequest):
    status: TicketStatus | None = None


class TicketResponse(BaseModel):
    id: UUID
    pc_id: str
    pc_name: str
    user_name: str
    patrimonial_id: str | None = None
    brand: str | None = None
    model: str | None = None
    date: date
    assigned_engineer: str
    maintenance_type: MaintenanceKind
    problem_description: str
    actions_taken: str
    status: TicketStatus
    created_at: datetime
    updated_at: datetime

    model_config = ConfigDict(from_attributes=True)


# --- Dashboard ---
class AlertResponse(BaseModel):
    kind: str
    message: str
    ticket_id: UUID | None = None
    asset_kind: str | None = None
    asset_id: str | None = None
    due_date: date | None = None

    model_config = ConfigDict(from_attributes=True)


class MonthlyCountResponse(BaseModel):
    month: int
    label: str
    preventive: int
    corrective: int
    peripherals: int

    model_config = ConfigDict(from_attributes=True)


class SummaryResponse(BaseModel):
    equipment_count: int
    peripheral_count: int
    open_tickets: int
    overdue_assets: int
    upcoming_assets: int

    model_config = ConfigDict(from_attributes=True)
