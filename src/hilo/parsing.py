"""Parsing utilities for player answers and AI judge replies."""

from __future__ import annotations

import json
import math
import re
from dataclasses import dataclass
from typing import Any

WHITESPACE_RE = re.compile(r"\s+")
FENCED_BLOCK_RE = re.compile(r"^```(?:[A-Za-z][\w-]*(?=\s))?\s*\n?(.*?)\n?```$", flags=re.DOTALL)

PARSE_ERROR_REASON = "parse error"


@dataclass(frozen=True)
class AIJudgment:
    valid: bool
    rank: int | float | None
    reason: str | None
    matched_to: str | None = None
    source: str = "parsed"

    def to_dict(self) -> dict[str, Any]:
        payload: dict[str, Any] = {"valid": self.valid, "rank": self.rank, "reason": self.reason}
        if self.matched_to is not None:
            payload["matched_to"] = self.matched_to
        return payload


UNPARSEABLE_JUDGMENT = AIJudgment(
    valid=False,
    rank=None,
    reason=PARSE_ERROR_REASON,
    source="unparseable",
)


def normalize_answer(text: str) -> str:
    """Canonicalize free text for comparison: trim, lowercase, collapse whitespace."""

    return WHITESPACE_RE.sub(" ", text.strip().lower())


def strip_code_fence(text: str) -> str:
    """Remove one enclosing ``` fence (with optional language label) if present."""

    cleaned = text.strip()
    match = FENCED_BLOCK_RE.match(cleaned)
    if match:
        cleaned = match.group(1).strip()
    return cleaned


def _coerce_rank(value: object) -> int | float | None:
    # bool is an int subclass; a judge replying `"rank": true` is unranked.
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return None
    if isinstance(value, float) and not math.isfinite(value):
        return None
    return value


def _coerce_reason(value: object) -> str | None:
    if value is None:
        return None
    if isinstance(value, str):
        return value
    return str(value)


def _coerce_from_payload(payload: dict[str, Any]) -> AIJudgment:
    matched_to = payload.get("matched_to")
    return AIJudgment(
        valid=bool(payload.get("valid")),
        rank=_coerce_rank(payload.get("rank")),
        reason=_coerce_reason(payload.get("reason")),
        matched_to=matched_to if isinstance(matched_to, str) and matched_to else None,
    )


def parse_ai_judgment(raw_text: str) -> AIJudgment:
    """Turn the judge's raw reply into an AIJudgment without ever raising.

    Anything that is not a JSON object (after removing an optional code fence)
    becomes the fixed ``parse error`` miss. Field types are coerced one by one:
    ``valid`` by truthiness, ``rank`` only when it is a finite number, and
    ``matched_to`` only when it is a non-empty string. A missing ``reason`` stays
    ``None`` on this path.
    """

    if not isinstance(raw_text, str):
        return UNPARSEABLE_JUDGMENT

    cleaned = strip_code_fence(raw_text)
    if not cleaned:
        return UNPARSEABLE_JUDGMENT

    try:
        payload = json.loads(cleaned)
    except (ValueError, RecursionError):
        return UNPARSEABLE_JUDGMENT

    if not isinstance(payload, dict):
        return UNPARSEABLE_JUDGMENT

    return _coerce_from_payload(payload)
