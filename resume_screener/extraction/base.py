from abc import ABC, abstractmethod


class BaseTextExtractor(ABC):
    """Contract for all document text extraction adapters."""

    document_format: str = ""

    @abstractmethod
    def extract(self, content: bytes) -> str:
        """Extract plain text from a binary document.

        Args:
            content: Raw file content.

        Returns:
            Extracted text as a single stripped string.

        Raises:
            ExtractionError: if the document is corrupt, encrypted or invalid.
        """
