"""
File tree base — the contract between the generator and storage.

The core never opens files itself. It reads, creates, overwrites and
lists through a FileTree, which keeps it testable against the in-memory
implementation.

Paths are "/"-delimited and relative to the tree root. The root
directory itself is the empty string.
"""

from __future__ import annotations

from abc import ABC, abstractmethod


class FileTreeError(Exception):
    """Raised when a file tree operation cannot be completed."""

    def __init__(self, message: str, path: str | None = None):
        super().__init__(message)
        self.path = path


class FileAlreadyExistsError(FileTreeError):
    """Raised by create() when the target path is already taken."""


class DirectoryNotFoundError(FileTreeError):
    """Raised by list_files() when the directory does not exist."""


def normalize_tree_path(path: str) -> str:
    """Collapse a path to its canonical tree form.

    Drops empty and "." segments, so "./src//users/" becomes "src/users".
    """
    parts = [p for p in path.replace("\\", "/").split("/") if p not in ("", ".")]
    return "/".join(parts)


class FileTree(ABC):
    """Abstract file tree.

    To add a new backend:
        1. Subclass FileTree
        2. Implement read, exists, list_files and _write
        3. Pass an instance to the generation use case
    """

    # True when writes are staged instead of stored
    dry_run: bool = False

    @abstractmethod
    def read(self, path: str) -> str | None:
        """Return the file's text, or None if it does not exist.

        Raises:
            FileTreeError: If the file exists but cannot be read or decoded.
        """

    @abstractmethod
    def exists(self, path: str) -> bool:
        """Check whether a file exists at path."""

    @abstractmethod
    def list_files(self, directory: str) -> list[str]:
        """Return the names of the files directly inside directory, sorted.

        Raises:
            DirectoryNotFoundError: If the directory does not exist.
        """

    @abstractmethod
    def _write(self, path: str, content: str) -> None:
        """Store content at path, replacing anything already there."""

    def create(self, path: str, content: str) -> None:
        """Create a new file. Fails if the path is already taken."""
        if self.exists(path):
            raise FileAlreadyExistsError(f"File already exists: {path}", path=path)
        self._write(path, content)

    def overwrite(self, path: str, content: str) -> None:
        """Replace the content of an existing file."""
        if not self.exists(path):
            raise FileTreeError(f"Cannot overwrite missing file: {path}", path=path)
        self._write(path, content)
