"""
Domain models — Pydantic types for the generator.

All models are re-exported here for convenient access:

    from cqrs_scaffold.core.models import ArtifactKind, GeneratedFile, Diagnostic
"""

from cqrs_scaffold.core.models.artifact import ArtifactKind
from cqrs_scaffold.core.models.config import ScaffoldConfig
from cqrs_scaffold.core.models.generation import (
    Diagnostic,
    GeneratedFile,
    GenerationRequest,
    NormalizedRequest,
)

__all__ = [
    # artifact.py
    "ArtifactKind",
    # config.py
    "ScaffoldConfig",
    # generation.py
    "Diagnostic",
    "GeneratedFile",
    "GenerationRequest",
    "NormalizedRequest",
]
