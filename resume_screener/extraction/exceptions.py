class ExtractionError(Exception):
    """Raised when a document cannot be converted to plain text."""

    def __init__(self, document_format: str, reason: str) -> None:
        self.document_format = document_format
        self.reason = reason
        super().__init__(
            f"Failed to parse {document_format.upper()} file. "
            f"It might be corrupted or malformed. ({reason})"
        )


class UnsupportedFormatError(ExtractionError):
    """Raised when extraction is requested for a format with no adapter."""

    def __init__(self, document_format: str) -> None:
        super().__init__(document_format, "no extractor registered for this format")
