from resume_screener.extraction.exceptions import ExtractionError, UnsupportedFormatError
from resume_screener.extraction.extractor import DocumentExtractor
from resume_screener.extraction.factory import DocumentExtractorFactory

__all__ = [
    "DocumentExtractor",
    "DocumentExtractorFactory",
    "ExtractionError",
    "UnsupportedFormatError",
]
