"""Turns the oracle's untrusted free-form answer into an AnalysisResult.

The model is asked for bare JSON but routinely wraps it in prose, code fences
or truncates it. Parsing therefore runs in two tiers:

1. strict: slice from the first ``{`` to the last ``}`` and parse as JSON;
2. fallback: pull each field out independently with a regular expression,
   substituting a placeholder for anything that cannot be recovered.

``interpret`` never raises; fidelity degrades field by field instead.
"""

import json
import re
from typing import Any

from resume_screener.logging.logger import Log
from resume_screener.scoring.exceptions import ScoringError
from resume_screener.scoring.models import AnalysisResult
from resume_screener.scoring.validator import MAX_SCORE, clamp_score, validate_and_build

STRENGTHS_PLACEHOLDER = "AI response format issue: Good points could not be extracted."
WEAKNESSES_PLACEHOLDER = "AI response format issue: Bad points could not be extracted."

_SCORE_PATTERN = re.compile(r'"score"\s*:\s*0*(\d+)(?![\deE])')
_MAX_SCORE_DIGITS = 3
_STRENGTHS_PATTERN = re.compile(r'"(?:goodPoints|strengths)"\s*:\s*"(.*?)(?<!\\)"', re.DOTALL)
_WEAKNESSES_PATTERN = re.compile(r'"(?:badPoints|weaknesses)"\s*:\s*"(.*?)(?<!\\)"', re.DOTALL)


def interpret(raw: str | None) -> AnalysisResult:
    """Parse a raw oracle answer into a structurally valid AnalysisResult."""
    text = (raw or "").strip()
    try:
        return validate_and_build(_parse_strict(text))
    except ScoringError as exc:
        Log.warning(f"Using fallback parsing for malformed AI response: {exc}")
        Log.debug(f"Problematic AI response:\n{text}")
        return _parse_fallback(text)


def _parse_strict(text: str) -> dict[str, Any]:
    start = text.find("{")
    end = text.rfind("}")
    if start == -1 or end == -1 or end < start:
        raise ScoringError("JSON object boundaries not found in AI response")
    try:
        parsed = json.loads(text[start : end + 1])
    except (ValueError, RecursionError) as exc:
        raise ScoringError(f"Invalid JSON in AI response: {exc}") from exc
    if not isinstance(parsed, dict):
        raise ScoringError("AI response JSON must be an object")
    return parsed


def _parse_fallback(text: str) -> AnalysisResult:
    score_match = _SCORE_PATTERN.search(text)
    return AnalysisResult(
        score=_extract_score(score_match),
        strengths=_extract_text(_STRENGTHS_PATTERN, text) or STRENGTHS_PLACEHOLDER,
        weaknesses=_extract_text(_WEAKNESSES_PATTERN, text) or WEAKNESSES_PLACEHOLDER,
    )


def _extract_score(match: re.Match[str] | None) -> int:
    if match is None:
        return 0
    digits = match.group(1)
    # anything wider than three digits is above the maximum anyway
    if len(digits) > _MAX_SCORE_DIGITS:
        return MAX_SCORE
    return clamp_score(int(digits))


def _extract_text(pattern: re.Pattern[str], text: str) -> str:
    match = pattern.search(text)
    if match is None:
        return ""
    return match.group(1).replace('\\"', '"')
