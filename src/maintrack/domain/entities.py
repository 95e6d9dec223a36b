from datetime import UTC, date, datetime
from typing import Literal
from uuid import UUID, uuid4

from pydantic import BaseModel, Field

# --- Enums / Literals ---
RoleType = Literal["admin", "technician", "viewer"]
UserStatus = Literal["active", "disabled"]
AssetKind = Literal["equipment", "peripheral"]
MaintenanceKind = Literal["preventive", "corrective"]
TicketStatus = Literal["open", "in_progress", "closed"]


def _utcnow() -> datetime:
    return datetime.now(UTC)


# --- User & Auth ---

class User(BaseModel):
    id: UUID = Field(default_factory=uuid4)
    email: str
    display_name: str
    password_hash: str
    roles: list[RoleType] = Field(default_factory=list)
    status: UserStatus = "active"
    created_at: datetime = Field(default_factory=_utcnow)
    updated_at: datetime = Field(default_factory=_utcnow)

# --- Assets ---

class AttachedDevice(BaseModel):
    """Inventory data for a device plugged into a computer (mouse, monitor, ...)."""

    patrimonial_id: str | None = None
    brand: str | None = None
    model: str | None = None

class Equipment(BaseModel):
    id: str  # inventory tag, e.g. "CPU001"
    name: str
    os: str
    type: str
    common_failure_points: str

    # Hardware
    processor: str | None = None
    ram_amount: str | None = None
    ram_type: str | None = None
    storage_capacity: str | None = None
    storage_type: str | None = None
    ip_address: str | None = None

    # Inventory
    user_name: str | None = None
    patrimonial_id: str | None = None
    mouse: AttachedDevice | None = None
    monitor: AttachedDevice | None = None
    regulator: AttachedDevice | None = None
    keyboard: AttachedDevice | None = None
    pc_status: str | None = None
    reusable_parts: str | None = None

    # Preventive schedule
    last_maintenance_date: date | None = None
    last_technician: str | None = None
    next_maintenance_date: date | None = None

    created_at: datetime = Field(default_factory=_utcnow)
    updated_at: datetime = Field(default_factory=_utcnow)

class Peripheral(BaseModel):
    id: str
    name: str
    type: str
    common_failure_points: str
    patrimonial_id: str | None = None
    brand: str | None = None
    model: str | None = None
    location: str | None = None
    status: str = "operational"

    last_maintenance_date: date | None = None
    last_technician: str | None = None
    next_maintenance_date: date | None = None

    created_at: datetime = Field(default_factory=_utcnow)
    updated_at: datetime = Field(default_factory=_utcnow)

# --- Maintenance ---

class MaintenanceImage(BaseModel):
    url: str  # data URI or storage URL

class MaintenanceRecord(BaseModel):
    id: UUID = Field(default_factory=uuid4)
    asset_kind: AssetKind
    asset_id: str
    kind: MaintenanceKind = "preventive"
    date: date
    technician: str
    description: str
    images: list[MaintenanceImage] = Field(default_factory=list)
    created_at: datetime = Field(default_factory=_utcnow)
    updated_at: datetime = Field(default_factory=_utcnow)

# --- Tickets ---

class Ticket(BaseModel):
    id: UUID = Field(default_factory=uuid4)
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
    status: TicketStatus = "open"
    created_at: datetime = Field(default_factory=_utcnow)
    updated_at: datetime = Field(default_factory=_utcnow)
