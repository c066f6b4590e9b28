"""Validates a parsed oracle answer against the AnalysisResult contract."""

import math
from typing import Any

from resume_screener.scoring.exceptions import ScoringValidationError
from resume_screener.scoring.models import AnalysisResult

MIN_SCORE = 0
MAX_SCORE = 100

STRENGTHS_KEYS = ("goodPoints", "strengths")
WEAKNESSES_KEYS = ("badPoints", "weaknesses")


def validate_and_build(data: dict[str, Any]) -> AnalysisResult:
    """Validate a parsed answer and build an AnalysisResult.

    Raises:
        ScoringValidationError: on a missing or mistyped field.
    """
    return AnalysisResult(
        score=_build_score(data.get("score")),
        strengths=_build_text(data, STRENGTHS_KEYS),
        weaknesses=_build_text(data, WEAKNESSES_KEYS),
    )


def clamp_score(value: float) -> int:
    return max(MIN_SCORE, min(MAX_SCORE, round(value)))


def _build_score(raw: Any) -> int:
    # bool is an int subclass; a JSON true/false is not a score
    if isinstance(raw, bool) or not isinstance(raw, (int, float)):
        raise ScoringValidationError(f"'score' must be a number, got {raw!r}")
    if isinstance(raw, float) and not math.isfinite(raw):
        raise ScoringValidationError(f"'score' must be finite, got {raw!r}")
    return clamp_score(raw)


def _build_text(data: dict[str, Any], keys: tuple[str, ...]) -> str:
    for key in keys:
        if key in data:
            value = data[key]
            if not isinstance(value, str):
                raise ScoringValidationError(f"'{key}' must be a string, got {value!r}")
            return value
    raise ScoringValidationError(f"Missing required field: {keys[0]}")
