import pymupdf

from resume_screener.extraction.base import BaseTextExtractor
from resume_screener.extraction.exceptions import ExtractionError


class PyMuPdfAdapter(BaseTextExtractor):
    """Extracts text from PDF using PyMuPDF."""

    document_format = "pdf"

    def extract(self, content: bytes) -> str:
        try:
            with pymupdf.open(stream=content, filetype="pdf") as doc:  # type: ignore[no-untyped-call]
                if doc.needs_pass:
                    raise ExtractionError(self.document_format, "document is encrypted")
                pages = [page.get_text() for page in doc]
        except ExtractionError:
            raise
        except Exception as exc:
            raise ExtractionError(self.document_format, f"pymupdf: {exc}") from exc
        return "\n".join(pages).strip()
