from resume_screener.storage.exceptions import (
    DocumentNotFoundError,
    InvalidHandleError,
    StorageError,
)
from resume_screener.storage.local_store import LocalFileStore

__all__ = ["DocumentNotFoundError", "InvalidHandleError", "LocalFileStore", "StorageError"]
