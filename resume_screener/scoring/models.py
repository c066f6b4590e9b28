from dataclasses import dataclass


@dataclass(frozen=True)
class AnalysisResult:
    """Validated verdict for one resume against a job description."""

    score: int
    strengths: str
    weaknesses: str
