from dataclasses import dataclass
from pathlib import PurePath

from resume_screener.scoring.models import AnalysisResult


def declared_format(filename: str) -> str:
    """Lower-cased extension without the dot, e.g. ``"CV.PDF"`` -> ``"pdf"``."""
    return PurePath(filename).suffix.lower().lstrip(".")


@dataclass(frozen=True)
class UploadedDocument:
    """A stored upload awaiting analysis; bytes live in the document store."""

    handle: str
    filename: str
    declared_format: str

    @classmethod
    def from_upload(cls, handle: str, filename: str) -> "UploadedDocument":
        return cls(handle=handle, filename=filename, declared_format=declared_format(filename))


@dataclass(frozen=True)
class SuccessOutcome:
    """A document that was analyzed; its stored file is retained."""

    filename: str
    handle: str
    analysis: AnalysisResult

    def to_payload(self) -> dict[str, object]:
        return {
            "filename": self.filename,
            "savedFilename": self.handle,
            "score": self.analysis.score,
            "strengths": self.analysis.strengths,
            "weaknesses": self.analysis.weaknesses,
        }


@dataclass(frozen=True)
class FailureOutcome:
    """A document that could not be analyzed; its stored file was removed."""

    filename: str
    error: str

    def to_payload(self) -> dict[str, object]:
        return {"filename": self.filename, "error": self.error}


FileOutcome = SuccessOutcome | FailureOutcome
