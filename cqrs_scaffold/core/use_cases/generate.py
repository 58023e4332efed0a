"""
Generate use case — create a command/query, its handler, and register it.

One pipeline serves every artifact kind:

    validate → normalize → render × 2 → create × 2 → update module file

The two files are written before the module update starts. A module
update failure surfaces as ModuleUpdateError and never rolls back or
masks the files already created.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from functools import partial

from cqrs_scaffold.adapters.base import FileTree
from cqrs_scaffold.core.models.artifact import ArtifactKind
from cqrs_scaffold.core.models.config import ScaffoldConfig
from cqrs_scaffold.core.models.generation import (
    Diagnostic,
    GeneratedFile,
    GenerationRequest,
    NormalizedRequest,
)
from cqrs_scaffold.core.services.generators import COMMAND, QUERY
from cqrs_scaffold.core.services.generators.template import render_template
from cqrs_scaffold.core.services.module_updater import update_module_file
from cqrs_scaffold.core.services.options import normalize_options

logger = logging.getLogger(__name__)


class InputValidationError(Exception):
    """Raised when a generation request is unusable (e.g. empty name)."""


@dataclass
class GenerationResult:
    """Result of one generation run."""

    kind: str
    name: str
    directory: str
    files: list[GeneratedFile] = field(default_factory=list)
    module_path: str | None = None
    module_updated: bool = False
    module_skipped: bool = False
    diagnostics: list[Diagnostic] = field(default_factory=list)
    dry_run: bool = False

    @property
    def warnings(self) -> list[Diagnostic]:
        return [d for d in self.diagnostics if d.level == "warning"]

    def to_dict(self) -> dict:
        return {
            "kind": self.kind,
            "name": self.name,
            "directory": self.directory,
            "files": [f.path for f in self.files],
            "module": {
                "path": self.module_path,
                "updated": self.module_updated,
                "skipped": self.module_skipped,
            },
            "diagnostics": [d.model_dump() for d in self.diagnostics],
            "dry_run": self.dry_run,
        }


def render_files(kind: ArtifactKind, request: NormalizedRequest) -> list[GeneratedFile]:
    """Render the artifact and handler files for a normalized request.

    Returns:
        [artifact file, handler file], with tree paths.
    """
    name = request.name
    base = request.normalized_path
    artifact_dir = base if request.flat else f"{base}impl/"
    handler_dir = base if request.flat else f"{base}handlers/"

    import_path = kind.import_path(name, request.flat)

    return [
        GeneratedFile(
            path=f"{artifact_dir}{name}.{kind.file_suffix}.ts",
            content=render_template(kind.artifact_template, name),
            reason=f"{kind.label} class and payload for '{name}'",
        ),
        GeneratedFile(
            path=f"{handler_dir}{name}.handler.ts",
            content=render_template(kind.handler_template, name, importPath=import_path),
            reason=f"{kind.label} handler for '{name}'",
        ),
    ]


def generate_artifacts(
    kind: ArtifactKind,
    request: GenerationRequest,
    tree: FileTree,
    *,
    config: ScaffoldConfig | None = None,
) -> GenerationResult:
    """Generate one CQRS artifact and its handler into *tree*.

    Args:
        kind: Which artifact to generate (command, query).
        request: Raw user request.
        tree: File tree to write into.
        config: Project defaults (source root, module suffix, ...).

    Raises:
        InputValidationError: If the name is missing. Nothing is written.
        FileTreeError: If a generated file cannot be created.
        ModuleUpdateError: If the located module file cannot be patched.
    """
    if not request.name or not request.name.strip():
        raise InputValidationError(f"{kind.label} name is required")

    config = config or ScaffoldConfig()
    normalized = normalize_options(request, config)

    result = GenerationResult(
        kind=kind.key,
        name=normalized.name,
        directory=normalized.normalized_path,
        dry_run=tree.dry_run,
    )

    for generated in render_files(kind, normalized):
        tree.create(generated.path, generated.content)
        result.files.append(generated)
        logger.info("Created %s", generated.path)

    if normalized.skip_import:
        result.module_skipped = True
        return result

    update = update_module_file(tree, normalized, config.module_suffix)
    result.module_path = update.module_path
    result.module_updated = update.updated
    result.diagnostics.extend(update.diagnostics)

    for diag in update.diagnostics:
        if diag.level == "warning":
            logger.debug("%s: %s", diag.kind, diag.message)
    return result


generate_command = partial(generate_artifacts, COMMAND)
generate_query = partial(generate_artifacts, QUERY)
