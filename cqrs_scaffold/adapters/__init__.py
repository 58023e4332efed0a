"""Adapters — file-tree bindings used by the generator.

Public re-exports for convenient access.
"""

from cqrs_scaffold.adapters.base import (
    DirectoryNotFoundError,
    FileAlreadyExistsError,
    FileTree,
    FileTreeError,
)
from cqrs_scaffold.adapters.filesystem import DiskFileTree
from cqrs_scaffold.adapters.memory import MemoryFileTree

__all__ = [
    "DirectoryNotFoundError",
    "DiskFileTree",
    "FileAlreadyExistsError",
    "FileTree",
    "FileTreeError",
    "MemoryFileTree",
]
