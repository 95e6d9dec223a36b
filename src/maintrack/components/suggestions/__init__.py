"""
Suggestions component - Maintenance procedures proposed by a language model.
"""

from .component import (
    NO_HISTORY,
    NOT_SPECIFIED,
    build_history_summary,
    build_prompt,
    parse_procedures,
    run_suggest,
)
from .models import SuggestInput, SuggestionOutput
from .ports import AssetReaderPort, HistoryPort, SuggesterPort

__all__ = [
    "run_suggest",
    "build_history_summary",
    "build_prompt",
    "parse_procedures",
    "NO_HISTORY",
    "NOT_SPECIFIED",
    "SuggestInput",
    "SuggestionOutput",
    "AssetReaderPort",
    "HistoryPort",
    "SuggesterPort",
]
