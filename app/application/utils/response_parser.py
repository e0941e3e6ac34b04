"""
Extraction of the grade record from raw grading-service text.

Models are asked for bare JSON but routinely wrap it in markdown code fences
or surround it with prose, so parsing is tolerant:

1. every ```json / ``` fence marker is removed (case-insensitive)
2. if what remains is not a JSON object on its own, the span from the first
   "{" to the last "}" is used instead
3. the candidate must decode to a JSON object, otherwise ParseError

Field coercion never fails: a missing or non-numeric score becomes 0 and
missing text fields get fixed fallback strings. Range checks are left to
normalize_score.
"""

from __future__ import annotations

import json
import math
import re
from typing import Any

from app.application.exceptions import ParseError
from app.domain.entities.evaluation import EvaluationFields

MISSING_ANALYSIS = "No se pudo generar análisis."
MISSING_FEEDBACK = "No se pudo generar feedback."

_FENCE_JSON = re.compile(r"```json\s*", re.IGNORECASE)
_FENCE = re.compile(r"```\s*")
_OBJECT_SPAN = re.compile(r"\{[\s\S]*\}")
_LEADING_NUMBER = re.compile(
    r"^\s*([-+]?(?:inf(?:inity)?\b|(?:\d+(?:[.,]\d+)?|[.,]\d+)(?:[eE][-+]?\d+)?))",
    re.IGNORECASE,
)


def strip_code_fences(raw: str) -> str:
    cleaned = _FENCE_JSON.sub("", raw or "")
    cleaned = _FENCE.sub("", cleaned)
    return cleaned.strip()


def parse_grading_response(raw: str) -> EvaluationFields:
    cleaned = strip_code_fences(raw)

    data = _load_object(cleaned)
    if data is None:
        match = _OBJECT_SPAN.search(cleaned)
        if not match:
            raise ParseError(f"No JSON object in grading output. Snippet: {_snippet(raw)!r}", raw=raw)
        data = _load_object(match.group(0))
        if data is None:
            raise ParseError(f"Invalid JSON in grading output. Snippet: {_snippet(raw)!r}", raw=raw)

    return EvaluationFields(
        score=coerce_score(data.get("score")),
        strengths=_text_or(data.get("strengths"), MISSING_ANALYSIS),
        improvements=_text_or(data.get("improvements"), MISSING_ANALYSIS),
        feedback=_text_or(data.get("feedback"), MISSING_FEEDBACK),
    )


def coerce_score(value: Any) -> float:
    """
    Best-effort float conversion; anything unreadable is 0.
    Accepts "8.5", "8,5", "8.5/10", "1e3" and "Infinity". Out-of-range values are
    returned as-is (possibly inf) for normalize_score to clamp.
    """
    if isinstance(value, bool) or value is None:
        return 0.0
    if isinstance(value, int):
        try:
            return float(value)
        except OverflowError:
            return math.inf if value > 0 else -math.inf
    if isinstance(value, float):
        return value
    if isinstance(value, str):
        match = _LEADING_NUMBER.match(value)
        if match:
            return float(match.group(1).replace(",", "."))
    return 0.0


def _load_object(text: str) -> dict[str, Any] | None:
    try:
        data = json.loads(text)
    except ValueError:
        return None
    return data if isinstance(data, dict) else None


def _text_or(value: Any, fallback: str) -> str:
    if isinstance(value, str) and value.strip():
        return value
    return fallback


def _snippet(raw: str) -> str:
    return (raw or "")[:200].replace("\n", " ")
