from __future__ import annotations

import math

MIN_SCORE = 0.0
MAX_SCORE = 10.0


def normalize_score(value: float | None) -> float:
    """Clamp a raw score into [0, 10] and round half-up to one decimal. NaN/None/junk -> 0; +inf -> 10, -inf -> 0."""
    if value is None:
        return MIN_SCORE
    try:
        score = float(value)
    except (TypeError, ValueError):
        return MIN_SCORE
    if math.isnan(score):
        return MIN_SCORE
    score = min(MAX_SCORE, max(MIN_SCORE, score))
    return math.floor(score * 10 + 0.5) / 10
