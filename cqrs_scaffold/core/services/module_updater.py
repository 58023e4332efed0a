"""
Module updater — find the sibling module file and register a handler.

The module file is looked up exactly one directory above the generation
directory, by file-name suffix:

    src/users/commands/          ← generation directory
    src/users/users.module.ts    ← module file that gets patched

Lookup problems are diagnostics, not errors: the generated files are
still useful without the registration. Problems with a module file that
*was* found are errors, wrapped in ModuleUpdateError.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from cqrs_scaffold.adapters.base import FileTree, FileTreeError
from cqrs_scaffold.core.models.generation import Diagnostic, NormalizedRequest
from cqrs_scaffold.core.services.module_patcher import (
    ProvidersNotFoundError,
    patch_module_content,
)
from cqrs_scaffold.core.services.naming import classify
from cqrs_scaffold.core.services.path_utils import get_parent_path, handler_import_path

logger = logging.getLogger(__name__)

DEFAULT_MODULE_SUFFIX = ".module.ts"


class ModuleUpdateError(Exception):
    """Raised when a located module file cannot be read, patched or written.

    Attributes:
        path:      Module file path.
        operation: Step that failed ("read", "patch" or "write").
    """

    def __init__(self, message: str, *, path: str, operation: str):
        super().__init__(f"Failed to update module file {path} ({operation}): {message}")
        self.path = path
        self.operation = operation


@dataclass
class ModuleUpdateResult:
    """Outcome of the module update step."""

    module_path: str | None = None
    updated: bool = False
    diagnostics: list[Diagnostic] = field(default_factory=list)


def handler_class_name(name: str) -> str:
    """Class name of the generated handler, e.g. "CreateUserHandler"."""
    return f"{classify(name)}Handler"


def find_module_file(
    tree: FileTree,
    normalized_path: str,
    suffix: str = DEFAULT_MODULE_SUFFIX,
) -> tuple[str | None, list[Diagnostic]]:
    """Locate the module file one level above *normalized_path*.

    Returns:
        (module_path or None, diagnostics). With several candidates the
        first in listing order wins and a warning is attached.
    """
    parent = get_parent_path(normalized_path, 1)
    where = parent or "./"

    try:
        names = tree.list_files(parent)
    except FileTreeError as e:
        logger.debug("Cannot list %s: %s", where, e)
        return None, [
            Diagnostic(
                kind="directory_unreadable",
                message=f"Could not access directory {where}: {e}",
                path=where,
            )
        ]

    candidates = [f"{parent}{n}" for n in names if n.endswith(suffix)]

    if not candidates:
        return None, [
            Diagnostic(
                kind="module_not_found",
                message=f"No {suffix} files found in {where}",
                path=where,
            )
        ]

    diagnostics: list[Diagnostic] = []
    if len(candidates) > 1:
        diagnostics.append(
            Diagnostic(
                kind="multiple_modules",
                message=(
                    f"Multiple {suffix} files found in {where}: "
                    f"{', '.join(candidates)}; using {candidates[0]}"
                ),
                path=candidates[0],
            )
        )

    logger.debug("Found module file: %s", candidates[0])
    return candidates[0], diagnostics


def update_module_file(
    tree: FileTree,
    request: NormalizedRequest,
    suffix: str = DEFAULT_MODULE_SUFFIX,
) -> ModuleUpdateResult:
    """Import and register the request's handler in its module file.

    Raises:
        ModuleUpdateError: The module file exists but could not be read,
            has no providers array, or could not be written back.
    """
    module_path, diagnostics = find_module_file(tree, request.normalized_path, suffix)
    result = ModuleUpdateResult(module_path=module_path, diagnostics=diagnostics)
    if module_path is None:
        return result

    try:
        content = tree.read(module_path)
    except FileTreeError as e:
        raise ModuleUpdateError(str(e), path=module_path, operation="read") from e
    if content is None:
        raise ModuleUpdateError("file could not be read", path=module_path, operation="read")

    class_name = handler_class_name(request.name)
    import_path = handler_import_path(
        module_path, request.normalized_path, request.name, request.flat
    )

    try:
        patch = patch_module_content(content, class_name, import_path)
    except ProvidersNotFoundError as e:
        raise ModuleUpdateError(
            f"No providers array found in {module_path}",
            path=module_path,
            operation="patch",
        ) from e

    if not patch.changed:
        result.diagnostics.append(
            Diagnostic(
                kind="already_registered",
                level="info",
                message=f"Handler {class_name} already exists in module",
                path=module_path,
            )
        )
        return result

    try:
        tree.overwrite(module_path, patch.content)
    except FileTreeError as e:
        raise ModuleUpdateError(str(e), path=module_path, operation="write") from e

    if not patch.import_added:
        result.diagnostics.append(
            Diagnostic(
                kind="import_skipped",
                level="info",
                message=f"{class_name} was already imported; registered it only",
                path=module_path,
            )
        )

    result.updated = True
    result.diagnostics.append(
        Diagnostic(
            kind="module_updated",
            level="info",
            message=f"Registered {class_name} from '{import_path}'",
            path=module_path,
        )
    )
    logger.info("Updated module file %s with %s", module_path, class_name)
    return result
