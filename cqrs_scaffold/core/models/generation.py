"""
Generation models — requests, rendered files and diagnostics.

A generation request flows through the pipeline as:

    GenerationRequest  → normalize_options() → NormalizedRequest
    NormalizedRequest  → render templates    → GeneratedFile × 2
    module update      → Diagnostic × N
"""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict


class GenerationRequest(BaseModel):
    """Raw user input for a single command/query generation.

    Attributes:
        name:        Feature identifier (free-form, dash-cased later).
        path:        Optional directory below the source root.
        skip_import: Don't patch the sibling module file.
        flat:        Put both files in the target directory.
    """

    name: str = ""
    path: str | None = None
    skip_import: bool = False
    flat: bool = False


class NormalizedRequest(BaseModel):
    """A request with defaults applied. Immutable once computed."""

    model_config = ConfigDict(frozen=True)

    name: str
    normalized_path: str            # always ends with "/"
    skip_import: bool = False
    flat: bool = False


class GeneratedFile(BaseModel):
    """A file produced by the generate phase.

    Attributes:
        path:      Path relative to the project root.
        content:   Full file content.
        reason:    Why this file was generated.
    """

    path: str
    content: str
    reason: str = ""


DiagnosticKind = Literal[
    "module_not_found",
    "multiple_modules",
    "directory_unreadable",
    "already_registered",
    "import_skipped",
    "module_updated",
]


class Diagnostic(BaseModel):
    """A structured notice from the pipeline, routed by the caller."""

    kind: DiagnosticKind
    level: Literal["info", "warning"] = "warning"
    message: str
    path: str | None = None
