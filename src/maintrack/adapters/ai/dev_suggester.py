"""
Dev Suggester Adapter.

Answers suggestion prompts offline with a canned checklist built from
the failure points in the prompt. Used when no OPENAI_API_KEY is set, so
local development never calls a hosted model.

Stores prompts in memory for test assertions.
"""

from __future__ import annotations

import logging

logger = logging.getLogger(__name__)

BASE_PROCEDURES = [
    "Clean dust from fans, vents and heat sinks.",
    "Check cables and connectors for wear or loose contacts.",
    "Verify the device powers on and runs its self-test without errors.",
]


class DevSuggester:
    def __init__(self) -> None:
        self.prompts: list[str] = []

    async def complete(self, prompt: str) -> str:
        self.prompts.append(prompt)
        logger.info("[DEV SUGGESTER] Answering prompt offline (%d chars)", len(prompt))

        procedures = list(BASE_PROCEDURES)
        for point in _failure_points(prompt):
            procedures.append(f"Inspect {point} and replace it if it shows faults.")
        return "\n".join(f"- {p}" for p in procedures)

    def clear(self) -> None:
        self.prompts.clear()


def _failure_points(prompt: str) -> list[str]:
    for line in prompt.splitlines():
        if line.startswith("Common Failure Points:"):
            value = line.split(":", 1)[1].strip()
            if value == "Not specified.":
                return []
            return [p.strip().rstrip(".") for p in value.split(",") if p.strip()]
    return []
