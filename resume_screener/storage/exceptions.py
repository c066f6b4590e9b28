class StorageError(Exception):
    """Base exception for all document store errors."""


class DocumentNotFoundError(StorageError):
    """Raised when no stored document exists for a handle."""


class InvalidHandleError(StorageError):
    """Raised when a handle is empty or would escape the storage root."""
