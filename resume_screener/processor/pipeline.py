from abc import ABC, abstractmethod
from dataclasses import dataclass

from resume_screener.processor.models import UploadedDocument
from resume_screener.scoring.models import AnalysisResult


@dataclass(slots=True)
class PipelineContext:
    document: UploadedDocument
    job_description: str
    raw_bytes: bytes = b""
    extracted_text: str = ""
    analysis: AnalysisResult | None = None


class PipelineStep(ABC):
    @abstractmethod
    def run(self, context: PipelineContext) -> PipelineContext:
        raise NotImplementedError
