"""
Filesystem tree — a FileTree rooted at a project directory.

All paths are resolved relative to the root and read/written as UTF-8.
In dry-run mode writes are staged in memory instead of touching disk;
later reads in the same run see the staged content.
"""

from __future__ import annotations

import logging
from pathlib import Path

from cqrs_scaffold.adapters.base import (
    DirectoryNotFoundError,
    FileTree,
    FileTreeError,
    normalize_tree_path,
)

logger = logging.getLogger(__name__)


class DiskFileTree(FileTree):
    """FileTree backed by the real filesystem.

    Args:
        root:    Project root directory.
        dry_run: Stage writes in memory instead of writing them.
    """

    def __init__(self, root: Path, *, dry_run: bool = False):
        self.root = Path(root)
        self.dry_run = dry_run
        self._staged: dict[str, str] = {}

    @property
    def staged(self) -> dict[str, str]:
        """Writes held back by dry-run mode (path → content)."""
        return dict(self._staged)

    def _resolve(self, path: str) -> Path:
        rel = normalize_tree_path(path)
        return self.root / rel if rel else self.root

    def read(self, path: str) -> str | None:
        key = normalize_tree_path(path)
        if key in self._staged:
            return self._staged[key]

        target = self._resolve(key)
        if not target.is_file():
            return None
        try:
            return target.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            raise FileTreeError(f"Cannot read {key}: {e}", path=key) from e

    def exists(self, path: str) -> bool:
        key = normalize_tree_path(path)
        return key in self._staged or self._resolve(key).is_file()

    def list_files(self, directory: str) -> list[str]:
        key = normalize_tree_path(directory)
        target = self._resolve(key)

        prefix = f"{key}/" if key else ""
        staged = {
            p[len(prefix):]
            for p in self._staged
            if p.startswith(prefix) and "/" not in p[len(prefix):]
        }

        if not target.is_dir():
            if staged:
                return sorted(staged)
            raise DirectoryNotFoundError(f"Directory not found: {key or '.'}", path=key)

        try:
            names = {p.name for p in target.iterdir() if p.is_file()}
        except OSError as e:
            raise FileTreeError(f"Cannot list {key or '.'}: {e}", path=key) from e
        return sorted(names | staged)

    def _write(self, path: str, content: str) -> None:
        key = normalize_tree_path(path)
        if self.dry_run:
            logger.info("[dry-run] would write %s (%d bytes)", key, len(content))
            self._staged[key] = content
            return

        target = self._resolve(key)
        try:
            target.parent.mkdir(parents=True, exist_ok=True)
            target.write_text(content, encoding="utf-8")
        except OSError as e:
            raise FileTreeError(f"Cannot write {key}: {e}", path=key) from e
        logger.info("Wrote %d bytes to %s", len(content), target)
