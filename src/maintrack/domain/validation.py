"""
Field-level validation shared by the asset, maintenance and ticket components.

Checks only what the domain needs to stay consistent: required values,
length limits from the rules file and a few formats.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Any

from pydantic import ValidationError

_IPV4_RE = re.compile(r"^(\d{1,3})\.(\d{1,3})\.(\d{1,3})\.(\d{1,3})$")


@dataclass(frozen=True)
class FieldError:
    """A single validation failure."""

    code: str
    message: str
    field: str | None = None


def check_required(data: dict[str, Any], fields: tuple[str, ...]) -> list[FieldError]:
    errors: list[FieldError] = []
    for name in fields:
        value = data.get(name)
        if value is None or (isinstance(value, str) and not value.strip()):
            errors.append(
                FieldError(
                    code=f"{name}_required",
                    message=f"{name.replace('_', ' ').capitalize()} is required",
                    field=name,
                )
            )
    return errors


def check_max_lengths(data: dict[str, Any], limits: dict[str, int]) -> list[FieldError]:
    errors: list[FieldError] = []
    for name, limit in limits.items():
        value = data.get(name)
        if isinstance(value, str) and len(value.strip()) > limit:
            errors.append(
                FieldError(
                    code=f"{name}_too_long",
                    message=f"{name.replace('_', ' ').capitalize()} must be {limit} characters or less",
                    field=name,
                )
            )
    return errors


def is_ipv4(value: str) -> bool:
    match = _IPV4_RE.match(value.strip())
    if not match:
        return False
    return all(0 <= int(octet) <= 255 for octet in match.groups())


def check_ip_address(data: dict[str, Any], field: str = "ip_address") -> list[FieldError]:
    value = data.get(field)
    if value and not is_ipv4(value):
        return [FieldError(code="ip_invalid", message="Invalid IPv4 address", field=field)]
    return []


def strip_strings(data: dict[str, Any]) -> dict[str, Any]:
    """Trim string values; blank optional strings become None."""
    cleaned: dict[str, Any] = {}
    for key, value in data.items():
        if isinstance(value, str):
            value = value.strip() or None
        cleaned[key] = value
    return cleaned


def errors_from_pydantic(exc: ValidationError) -> list[FieldError]:
    """Convert a pydantic ValidationError into FieldErrors."""
    errors: list[FieldError] = []
    for err in exc.errors():
        loc = ".".join(str(part) for part in err["loc"])
        errors.append(FieldError(code="invalid_field", message=f"{loc}: {err['msg']}", field=loc))
    return errors
