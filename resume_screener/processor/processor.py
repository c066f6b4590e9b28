from collections.abc import Sequence

from resume_screener.extraction.extractor import DocumentExtractor
from resume_screener.processor.models import UploadedDocument
from resume_screener.processor.pipeline import PipelineContext, PipelineStep
from resume_screener.processor.steps import ExtractTextStep, LoadDocumentStep, ScoreResumeStep
from resume_screener.scoring.models import AnalysisResult
from resume_screener.scoring.scorer import ResumeScorer
from resume_screener.storage.local_store import LocalFileStore


class Processor:
    """Runs the per-file pipeline: load -> extract -> score.

    Exceptions from any step propagate; the batch coordinator owns per-file
    failure isolation and cleanup.
    """

    def __init__(self, steps: Sequence[PipelineStep]) -> None:
        self._steps = tuple(steps)

    def process(self, document: UploadedDocument, job_description: str) -> AnalysisResult:
        context = PipelineContext(document=document, job_description=job_description)
        for step in self._steps:
            context = step.run(context)
        if context.analysis is None:
            raise RuntimeError(f"Pipeline produced no analysis for {document.filename}")
        return context.analysis


def build_processor(
    store: LocalFileStore,
    extractor: DocumentExtractor,
    scorer: ResumeScorer,
) -> Processor:
    """Build a Processor wired with the standard steps."""
    return Processor(
        steps=[
            LoadDocumentStep(store),
            ExtractTextStep(extractor),
            ScoreResumeStep(scorer),
        ]
    )

