"""
Option normalizer — apply defaults and canonicalize a generation request.
"""

from __future__ import annotations

from cqrs_scaffold.core.models.config import ScaffoldConfig
from cqrs_scaffold.core.models.generation import GenerationRequest, NormalizedRequest
from cqrs_scaffold.core.services.naming import dasherize


def normalize_options(
    request: GenerationRequest,
    config: ScaffoldConfig | None = None,
) -> NormalizedRequest:
    """Derive the canonical name and target directory of a request.

    The name is dash-cased. The directory defaults to the source root,
    a given path is placed below it, and the result always ends in "/":

        name="CreateUser", path=None     → "create-user", "src/"
        name="create user", path="users" → "create-user", "src/users/"
    """
    config = config or ScaffoldConfig()

    name = dasherize(request.name.strip())

    sub = (request.path or "").strip().strip("/")
    path = f"{config.source_root}/{sub}" if sub else config.source_root
    normalized_path = path if path.endswith("/") else f"{path}/"

    return NormalizedRequest(
        name=name,
        normalized_path=normalized_path,
        skip_import=request.skip_import or config.skip_import,
        flat=request.flat or config.flat,
    )
