"""
Suggestions component input/output models.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from maintrack.domain.entities import AssetKind
from maintrack.domain.validation import FieldError


@dataclass(frozen=True)
class SuggestInput:
    asset_kind: AssetKind
    asset_id: str


@dataclass(frozen=True)
class SuggestionOutput:
    """
    Parsed model answer.

    ``fallback`` is True when the model could not be reached or returned
    nothing usable; ``raw_text`` then holds the fallback message.
    """

    procedures: list[str] = field(default_factory=list)
    raw_text: str = ""
    fallback: bool = False
    errors: list[FieldError] = field(default_factory=list)
    success: bool = True
