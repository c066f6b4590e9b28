from resume_screener.extraction.extractor import DocumentExtractor
from resume_screener.logging.logger import Log
from resume_screener.processor.pipeline import PipelineContext, PipelineStep
from resume_screener.scoring.scorer import ResumeScorer
from resume_screener.storage.local_store import LocalFileStore


class LoadDocumentStep(PipelineStep):
    def __init__(self, store: LocalFileStore) -> None:
        self._store = store

    def run(self, context: PipelineContext) -> PipelineContext:
        context.raw_bytes = self._store.read(context.document.handle)
        Log.info(
            f"Loaded {len(context.raw_bytes)} bytes",
            filename=context.document.filename,
        )
        return context


class ExtractTextStep(PipelineStep):
    def __init__(self, extractor: DocumentExtractor) -> None:
        self._extractor = extractor

    def run(self, context: PipelineContext) -> PipelineContext:
        context.extracted_text = self._extractor.extract(
            context.document.declared_format,
            context.raw_bytes,
        )
        Log.info(
            f"Extracted {len(context.extracted_text)} chars",
            filename=context.document.filename,
        )
        return context


class ScoreResumeStep(PipelineStep):
    def __init__(self, scorer: ResumeScorer) -> None:
        self._scorer = scorer

    def run(self, context: PipelineContext) -> PipelineContext:
        context.analysis = self._scorer.score(
            context.extracted_text,
            context.job_description,
        )
        return context
