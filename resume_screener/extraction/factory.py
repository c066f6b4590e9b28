from resume_screener.config.settings import Settings
from resume_screener.extraction.base import BaseTextExtractor
from resume_screener.extraction.docx_adapter import DocxAdapter
from resume_screener.extraction.extractor import DocumentExtractor
from resume_screener.extraction.pdfplumber_adapter import PdfPlumberAdapter
from resume_screener.extraction.pymupdf_adapter import PyMuPdfAdapter


class DocumentExtractorFactory:
    """Creates the document extractor with the configured PDF engine."""

    PDF_ADAPTERS: dict[str, type[BaseTextExtractor]] = {
        "pdfplumber": PdfPlumberAdapter,
        "pymupdf": PyMuPdfAdapter,
    }

    @classmethod
    def create(cls, settings: Settings) -> DocumentExtractor:
        return DocumentExtractor(
            {
                "pdf": cls.create_pdf_adapter(settings),
                "docx": DocxAdapter(),
            }
        )

    @classmethod
    def create_pdf_adapter(cls, settings: Settings) -> BaseTextExtractor:
        engine = settings.pdf_engine.lower()
        adapter_cls = cls.PDF_ADAPTERS.get(engine)
        if adapter_cls is None:
            raise ValueError(
                f"Unknown PDF engine '{engine}'. Choose from: {list(cls.PDF_ADAPTERS)}"
            )
        return adapter_cls()
