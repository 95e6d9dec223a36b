"""
Peripheral component input/output models.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from maintrack.domain.entities import Peripheral
from maintrack.domain.validation import FieldError

PeripheralValidationError = FieldError


@dataclass(frozen=True)
class CreatePeripheralInput:
    data: dict[str, Any]


@dataclass(frozen=True)
class UpdatePeripheralInput:
    peripheral_id: str
    updates: dict[str, Any]


@dataclass(frozen=True)
class GetPeripheralInput:
    peripheral_id: str


@dataclass(frozen=True)
class DeletePeripheralInput:
    peripheral_id: str


@dataclass(frozen=True)
class PeripheralOutput:
    peripheral: Peripheral | None = None
    errors: list[PeripheralValidationError] = field(default_factory=list)
    success: bool = True


@dataclass(frozen=True)
class PeripheralListOutput:
    items: list[Peripheral]
    total: int
