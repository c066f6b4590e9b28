import io

import docx

from resume_screener.extraction.base import BaseTextExtractor
from resume_screener.extraction.exceptions import ExtractionError


class DocxAdapter(BaseTextExtractor):
    """Extracts body paragraph text from DOCX using python-docx.

    Styling, headers, footers and table cells are not part of the body
    paragraphs and are skipped.
    """

    document_format = "docx"

    def extract(self, content: bytes) -> str:
        try:
            document = docx.Document(io.BytesIO(content))
        except Exception as exc:
            raise ExtractionError(self.document_format, f"python-docx: {exc}") from exc
        paragraphs = [paragraph.text for paragraph in document.paragraphs]
        return "\n".join(paragraphs).strip()
