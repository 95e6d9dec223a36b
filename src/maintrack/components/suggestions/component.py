"""
Suggestions component - Maintenance procedures proposed by a language model.

The prompt is built from the asset type, its most recent maintenance
history and its known failure points. The model answers in free text,
which is split into one procedure per line.
"""

from __future__ import annotations

import asyncio
import logging
import re
from collections.abc import Iterable

from maintrack.components.maintenance import sort_newest_first
from maintrack.domain.entities import MaintenanceRecord
from maintrack.domain.validation import FieldError
from maintrack.rules.models import SuggestionRules

from .models import SuggestInput, SuggestionOutput
from .ports import AssetReaderPort, HistoryPort, SuggesterPort

logger = logging.getLogger(__name__)

NO_HISTORY = "No recent maintenance history."
NOT_SPECIFIED = "Not specified."

PROMPT_TEMPLATE = (
    "You are an expert maintenance technician. Based on the equipment type, "
    "maintenance history, and common failure points, suggest a list of "
    "maintenance procedures to perform.\n\n"
    "Equipment Type: {equipment_type}\n"
    "Maintenance History: {history}\n"
    "Common Failure Points: {failure_points}\n\n"
    "Suggested Maintenance Procedures:"
)

_BULLET_RE = re.compile(r"^(?:[-*•]|\d+[.)])(?:\s+|$)")


def build_history_summary(records: Iterable[MaintenanceRecord], limit: int) -> str:
    """One line per record, newest first, at most ``limit`` lines."""
    recent = sort_newest_first(records)[: max(limit, 0)]
    if not recent:
        return NO_HISTORY
    return "\n".join(
        f"Date: {r.date.isoformat()}, Technician: {r.technician}, Description: {r.description}"
        for r in recent
    )


def build_prompt(equipment_type: str, history: str, failure_points: str | None) -> str:
    return PROMPT_TEMPLATE.format(
        equipment_type=equipment_type,
        history=history,
        failure_points=(failure_points or "").strip() or NOT_SPECIFIED,
    )


def parse_procedures(text: str) -> list[str]:
    """Split a free-text answer into procedures, dropping list markers."""
    procedures = []
    for line in text.splitlines():
        item = _BULLET_RE.sub("", line.strip()).strip()
        if item:
            procedures.append(item)
    return procedures


async def run_suggest(
    inp: SuggestInput,
    *,
    assets: AssetReaderPort,
    history: HistoryPort,
    suggester: SuggesterPort,
    rules: SuggestionRules,
) -> SuggestionOutput:
    """
    Ask the model for maintenance procedures for one asset.

    Model failures never propagate: the caller gets the configured
    fallback message with ``fallback=True``. Repository reads run in a
    worker thread so the event loop is free while SQLite is queried.
    """
    asset = await asyncio.to_thread(assets.get_by_id, inp.asset_id)
    if asset is None:
        label = "Equipment" if inp.asset_kind == "equipment" else "Peripheral"
        return SuggestionOutput(
            errors=[FieldError(code="not_found", message=f"{label} {inp.asset_id} not found")],
            success=False,
        )

    records = await asyncio.to_thread(history.list_for_asset, inp.asset_kind, inp.asset_id)
    summary = build_history_summary(records, rules.history_limit)
    prompt = build_prompt(asset.type, summary, asset.common_failure_points)

    try:
        text = await suggester.complete(prompt)
    except Exception as e:
        logger.warning(
            "Suggestion request failed for %s %s: %s", inp.asset_kind, inp.asset_id, e
        )
        return SuggestionOutput(raw_text=rules.fallback_message, fallback=True)

    procedures = parse_procedures(text or "")
    if not procedures:
        logger.warning("Empty suggestion answer for %s %s", inp.asset_kind, inp.asset_id)
        return SuggestionOutput(raw_text=rules.fallback_message, fallback=True)

    logger.info(
        "Received %d suggested procedures for %s %s",
        len(procedures),
        inp.asset_kind,
        inp.asset_id,
    )
    return SuggestionOutput(procedures=procedures, raw_text=text)
