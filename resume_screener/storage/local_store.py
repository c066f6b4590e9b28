import re
import secrets
import time
from pathlib import Path

from resume_screener.storage.exceptions import DocumentNotFoundError, InvalidHandleError

_UNSAFE_EXT_CHARS = re.compile(r"[^a-z0-9]")


def build_handle(filename: str, prefix: str = "resumes") -> str:
    """Build a unique storage handle that keeps the original extension.

    Example: ``resumes-1718000000000-483920117.pdf``
    """
    # only [a-z0-9] survives so the handle always passes path_for
    ext = _UNSAFE_EXT_CHARS.sub("", Path(filename).suffix.lower())
    suffix = f".{ext}" if ext else ""
    unique = f"{int(time.time() * 1000)}-{secrets.randbelow(10**9)}"
    return f"{prefix}-{unique}{suffix}"


class LocalFileStore:
    """Stores uploaded documents as flat files under a single root directory."""

    def __init__(self, root: Path) -> None:
        self._root = root

    @property
    def root(self) -> Path:
        return self._root

    def create(self, filename: str, content: bytes) -> str:
        """Persist content and return the handle it can be read back with."""
        self._root.mkdir(parents=True, exist_ok=True)
        handle = build_handle(filename)
        self.path_for(handle).write_bytes(content)
        return handle

    def read(self, handle: str) -> bytes:
        """Read stored bytes.

        Raises:
            InvalidHandleError: if the handle is malformed.
            DocumentNotFoundError: if nothing is stored under the handle.
        """
        path = self.path_for(handle)
        if not path.is_file():
            raise DocumentNotFoundError(f"Stored document not found: {handle}")
        return path.read_bytes()

    def delete(self, handle: str) -> None:
        """Remove a stored document. Deleting a missing document is a no-op."""
        self.path_for(handle).unlink(missing_ok=True)

    def exists(self, handle: str) -> bool:
        try:
            return self.path_for(handle).is_file()
        except InvalidHandleError:
            return False

    def path_for(self, handle: str) -> Path:
        """Resolve a handle to its path, rejecting anything outside the root."""
        if not handle or ".." in handle or "/" in handle or "\\" in handle:
            raise InvalidHandleError(f"Invalid document handle: {handle!r}")
        root = self._root.resolve()
        path = (root / handle).resolve()
        if path.parent != root:
            raise InvalidHandleError(f"Invalid document handle: {handle!r}")
        return path
