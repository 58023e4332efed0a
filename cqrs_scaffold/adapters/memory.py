"""
In-memory file tree — a dict-backed FileTree.

Used by tests and by callers that want to preview generated output
without touching the disk.
"""

from __future__ import annotations

from cqrs_scaffold.adapters.base import (
    DirectoryNotFoundError,
    FileTree,
    normalize_tree_path,
)


class MemoryFileTree(FileTree):
    """FileTree holding path → content in a dict.

    Directories exist implicitly whenever a file lives below them.
    """

    def __init__(self, files: dict[str, str] | None = None):
        self._files: dict[str, str] = {}
        for path, content in (files or {}).items():
            self._files[normalize_tree_path(path)] = content

    @property
    def files(self) -> dict[str, str]:
        """Snapshot of every file in the tree."""
        return dict(self._files)

    def read(self, path: str) -> str | None:
        return self._files.get(normalize_tree_path(path))

    def exists(self, path: str) -> bool:
        return normalize_tree_path(path) in self._files

    def list_files(self, directory: str) -> list[str]:
        directory = normalize_tree_path(directory)
        prefix = f"{directory}/" if directory else ""

        names: list[str] = []
        found_dir = not directory
        for path in self._files:
            if not path.startswith(prefix):
                continue
            found_dir = True
            rest = path[len(prefix):]
            if "/" not in rest:
                names.append(rest)

        if not found_dir:
            raise DirectoryNotFoundError(
                f"Directory not found: {directory}", path=directory
            )
        return sorted(names)

    def _write(self, path: str, content: str) -> None:
        self._files[normalize_tree_path(path)] = content
