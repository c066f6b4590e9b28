import io

import pdfplumber

from resume_screener.extraction.base import BaseTextExtractor
from resume_screener.extraction.exceptions import ExtractionError


class PdfPlumberAdapter(BaseTextExtractor):
    """Extracts text from PDF using pdfplumber."""

    document_format = "pdf"

    def extract(self, content: bytes) -> str:
        try:
            with pdfplumber.open(io.BytesIO(content)) as pdf:
                pages = [page.extract_text() or "" for page in pdf.pages]
        except Exception as exc:
            raise ExtractionError(self.document_format, f"pdfplumber: {exc}") from exc
        return "\n".join(pages).strip()
