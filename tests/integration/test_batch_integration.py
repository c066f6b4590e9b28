"""End-to-end batch analysis with real storage and extraction."""

import json
from pathlib import Path
from unittest.mock import MagicMock

from resume_screener.batch.coordinator import BatchCoordinator
from resume_screener.extraction.docx_adapter import DocxAdapter
from resume_screener.extraction.extractor import DocumentExtractor
from resume_screener.extraction.pdfplumber_adapter import PdfPlumberAdapter
from resume_screener.processor.models import FailureOutcome, SuccessOutcome, UploadedDocument
from resume_screener.processor.processor import build_processor
from resume_screener.scoring.client_base import BaseScoringClient
from resume_screener.scoring.scorer import ResumeScorer
from resume_screener.storage.local_store import LocalFileStore


def _build(
    tmp_path: Path,
    client: BaseScoringClient | None,
) -> tuple[BatchCoordinator, LocalFileStore]:
    store = LocalFileStore(tmp_path / "uploads")
    extractor = DocumentExtractor({"pdf": PdfPlumberAdapter(), "docx": DocxAdapter()})
    scorer = ResumeScorer(client=client, model="test-model")
    coordinator = BatchCoordinator(
        processor=build_processor(store=store, extractor=extractor, scorer=scorer),
        store=store,
        supported_formats=extractor.supported_formats,
    )
    return coordinator, store


def _upload(store: LocalFileStore, filename: str, content: bytes) -> UploadedDocument:
    return UploadedDocument.from_upload(store.create(filename, content), filename)


def _client_returning(raw: str) -> MagicMock:
    client = MagicMock(spec=BaseScoringClient)
    client.generate.return_value = raw
    return client


class TestMixedBatch:
    def test_good_unsupported_and_corrupt_files(
        self,
        tmp_path: Path,
        sample_pdf_bytes: bytes,
    ) -> None:
        client = _client_returning(
            'Here you go: {"score": 84, "goodPoints": "Python depth", "badPoints": "No AWS"}'
        )
        coordinator, store = _build(tmp_path, client)
        good = _upload(store, "a.pdf", sample_pdf_bytes)
        unsupported = _upload(store, "b.txt", b"plain text resume")
        corrupt = _upload(store, "c.docx", b"this is not a zip archive")

        outcomes = coordinator.run_batch([good, unsupported, corrupt], "Python engineer")

        assert len(outcomes) == 3
        first, second, third = outcomes
        assert isinstance(first, SuccessOutcome)
        assert first.analysis.score == 84
        assert first.analysis.strengths == "Python depth"
        assert isinstance(second, FailureOutcome)
        assert "Unsupported file type" in second.error
        assert isinstance(third, FailureOutcome)
        assert "Failed to parse DOCX file" in third.error

        assert store.exists(good.handle)
        assert not store.exists(unsupported.handle)
        assert not store.exists(corrupt.handle)
        assert client.generate.call_count == 1

    def test_extracted_text_reaches_prompt(
        self,
        tmp_path: Path,
        sample_docx_bytes: bytes,
    ) -> None:
        client = _client_returning(
            json.dumps({"score": 10, "goodPoints": "g", "badPoints": "b"})
        )
        coordinator, store = _build(tmp_path, client)
        document = _upload(store, "cv.docx", sample_docx_bytes)

        coordinator.run_batch([document], "Needs Django")

        prompt = client.generate.call_args.kwargs["prompt"]
        assert "Needs Django" in prompt
        assert "Backend developer with Django experience" in prompt


class TestOracleDegradation:
    def test_missing_key_still_yields_success_outcomes(
        self,
        tmp_path: Path,
        sample_pdf_bytes: bytes,
    ) -> None:
        coordinator, store = _build(tmp_path, client=None)
        documents = [_upload(store, f"cv{i}.pdf", sample_pdf_bytes) for i in range(3)]

        outcomes = coordinator.run_batch(documents, "job")

        assert len(outcomes) == 3
        for outcome in outcomes:
            assert isinstance(outcome, SuccessOutcome)
            assert outcome.analysis.score == 0
            assert outcome.analysis.strengths == "API key not configured."

    def test_total_oracle_outage_keeps_one_outcome_per_file(
        self,
        tmp_path: Path,
        sample_pdf_bytes: bytes,
        sample_docx_bytes: bytes,
    ) -> None:
        client = MagicMock(spec=BaseScoringClient)
        client.generate.side_effect = TimeoutError("request timed out")
        coordinator, store = _build(tmp_path, client)
        documents = [
            _upload(store, "a.pdf", sample_pdf_bytes),
            _upload(store, "b.docx", sample_docx_bytes),
        ]

        outcomes = coordinator.run_batch(documents, "job")

        assert [type(o) for o in outcomes] == [SuccessOutcome, SuccessOutcome]
        for outcome in outcomes:
            assert isinstance(outcome, SuccessOutcome)
            assert "request timed out" in outcome.analysis.weaknesses
            assert store.exists(outcome.handle)
