"""
Equipment component input/output models.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from maintrack.domain.entities import Equipment
from maintrack.domain.validation import FieldError

EquipmentValidationError = FieldError

# --- Input Models ---


@dataclass(frozen=True)
class CreateEquipmentInput:
    """Input for registering a computer. ``data`` holds Equipment fields."""

    data: dict[str, Any]


@dataclass(frozen=True)
class UpdateEquipmentInput:
    """Input for a partial update of an existing computer."""

    equipment_id: str
    updates: dict[str, Any]


@dataclass(frozen=True)
class GetEquipmentInput:
    equipment_id: str


@dataclass(frozen=True)
class DeleteEquipmentInput:
    equipment_id: str


# --- Output Models ---


@dataclass(frozen=True)
class EquipmentOutput:
    """Output for single-item operations (get, create, update, delete)."""

    equipment: Equipment | None = None
    errors: list[EquipmentValidationError] = field(default_factory=list)
    success: bool = True


@dataclass(frozen=True)
class EquipmentListOutput:
    items: list[Equipment]
    total: int
