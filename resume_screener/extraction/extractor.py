from collections.abc import Mapping

from resume_screener.extraction.base import BaseTextExtractor
from resume_screener.extraction.exceptions import UnsupportedFormatError
from resume_screener.logging.logger import Log


class DocumentExtractor:
    """Dispatches extraction to the adapter registered for a declared format."""

    def __init__(self, adapters: Mapping[str, BaseTextExtractor]) -> None:
        self._adapters = {fmt.lower(): adapter for fmt, adapter in adapters.items()}

    @property
    def supported_formats(self) -> tuple[str, ...]:
        return tuple(self._adapters)

    def supports(self, document_format: str) -> bool:
        return document_format.lower() in self._adapters

    def extract(self, document_format: str, content: bytes) -> str:
        """Extract plain text from ``content`` using the format's adapter.

        Raises:
            UnsupportedFormatError: if no adapter is registered for the format.
            ExtractionError: if the adapter cannot decode the document.
        """
        adapter = self._adapters.get(document_format.lower())
        if adapter is None:
            raise UnsupportedFormatError(document_format)
        text = adapter.extract(content)
        Log.debug(f"Extracted {len(text)} chars from {document_format} document")
        return text
