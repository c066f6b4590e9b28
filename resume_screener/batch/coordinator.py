import asyncio
from collections.abc import Sequence
from pathlib import Path

from resume_screener.config.settings import Settings
from resume_screener.extraction.extractor import DocumentExtractor
from resume_screener.extraction.factory import DocumentExtractorFactory
from resume_screener.logging.logger import Log
from resume_screener.processor.models import (
    FailureOutcome,
    FileOutcome,
    SuccessOutcome,
    UploadedDocument,
)
from resume_screener.processor.processor import Processor, build_processor
from resume_screener.scoring.factory import ScoringClientFactory
from resume_screener.storage.local_store import LocalFileStore


class BatchValidationError(ValueError):
    """Raised when a batch is rejected before any per-file work starts."""


class BatchCoordinator:
    """Fans a batch of stored documents out to the per-file pipeline.

    Outcomes are returned in input order. A failing document is deleted from
    the store and reported as a FailureOutcome; it never affects its siblings.
    Documents that were analyzed are retained for later download.
    """

    def __init__(
        self,
        *,
        processor: Processor,
        store: LocalFileStore,
        supported_formats: Sequence[str],
        max_concurrency: int = 8,
    ) -> None:
        self._processor = processor
        self._store = store
        self._supported_formats = tuple(fmt.lower() for fmt in supported_formats)
        self._max_concurrency = max(1, max_concurrency)

    @property
    def store(self) -> LocalFileStore:
        return self._store

    async def analyze_batch(
        self,
        documents: Sequence[UploadedDocument],
        job_description: str,
    ) -> list[FileOutcome]:
        """Analyze every document against the job description.

        Raises:
            BatchValidationError: if the job description is blank or there
                are no documents. Nothing is deleted in that case.
        """
        validate_batch(documents, job_description)
        Log.info(f"Analyzing batch of {len(documents)} resume(s)")

        semaphore = asyncio.Semaphore(self._max_concurrency)

        async def task(document: UploadedDocument) -> FileOutcome:
            async with semaphore:
                return await self._analyze_one(document, job_description)

        outcomes = await asyncio.gather(*[task(d) for d in documents])
        failed = sum(isinstance(o, FailureOutcome) for o in outcomes)
        Log.info(f"Batch finished: {len(outcomes) - failed} analyzed, {failed} failed")
        return list(outcomes)

    def run_batch(
        self,
        documents: Sequence[UploadedDocument],
        job_description: str,
    ) -> list[FileOutcome]:
        """Blocking wrapper around analyze_batch for non-async callers."""
        return asyncio.run(self.analyze_batch(documents, job_description))

    async def _analyze_one(
        self,
        document: UploadedDocument,
        job_description: str,
    ) -> FileOutcome:
        if document.declared_format.lower() not in self._supported_formats:
            Log.warning("Unsupported file type uploaded", filename=document.filename)
            await asyncio.to_thread(self._discard, document)
            return FailureOutcome(
                filename=document.filename,
                error=self._unsupported_message(),
            )

        try:
            analysis = await asyncio.to_thread(
                self._processor.process, document, job_description
            )
        except Exception as exc:
            Log.error(f"Error processing file: {exc}", filename=document.filename)
            await asyncio.to_thread(self._discard, document)
            return FailureOutcome(
                filename=document.filename,
                error=f"Failed to process this resume: {exc}",
            )

        return SuccessOutcome(
            filename=document.filename,
            handle=document.handle,
            analysis=analysis,
        )

    def _discard(self, document: UploadedDocument) -> None:
        try:
            self._store.delete(document.handle)
        except Exception as exc:
            Log.error(f"Failed to remove stored document: {exc}", filename=document.filename)

    def _unsupported_message(self) -> str:
        allowed = " and ".join(fmt.upper() for fmt in self._supported_formats)
        return f"Unsupported file type. Only {allowed} files are allowed."


def validate_batch(documents: Sequence[object], job_description: str | None) -> None:
    """Reject a batch that has no job description or no documents."""
    if not job_description or not job_description.strip():
        raise BatchValidationError("Job description is required for analysis.")
    if not documents:
        raise BatchValidationError("No resume files uploaded for analysis.")


def build_coordinator(settings: Settings, store: LocalFileStore | None = None) -> BatchCoordinator:
    """Build a BatchCoordinator with all adapters resolved from settings."""
    if store is None:
        store = LocalFileStore(Path(settings.uploads_dir))
    extractor: DocumentExtractor = DocumentExtractorFactory.create(settings)
    scorer = ScoringClientFactory.create(settings)
    if not scorer.is_configured:
        Log.warning(
            f"No API key configured for provider '{settings.oracle_provider}'. "
            "AI analysis will return placeholder results."
        )
    return BatchCoordinator(
        processor=build_processor(store=store, extractor=extractor, scorer=scorer),
        store=store,
        supported_formats=extractor.supported_formats,
        max_concurrency=settings.max_concurrency,
    )
