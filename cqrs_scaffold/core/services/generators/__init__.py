"""
Generators — templates for each CQRS artifact kind.

Each generator module exposes one ``ArtifactKind`` describing the files
it produces. ``get_kind()`` looks one up by key.
"""

from __future__ import annotations

from cqrs_scaffold.core.models.artifact import ArtifactKind
from cqrs_scaffold.core.services.generators.command import COMMAND
from cqrs_scaffold.core.services.generators.query import QUERY

ARTIFACT_KINDS: dict[str, ArtifactKind] = {
    COMMAND.key: COMMAND,
    QUERY.key: QUERY,
}


def supported_kinds() -> list[str]:
    """Return the keys of all artifact kinds, sorted."""
    return sorted(ARTIFACT_KINDS)


def get_kind(key: str) -> ArtifactKind:
    """Look up an artifact kind by key.

    Raises:
        KeyError: If the kind is unknown.
    """
    try:
        return ARTIFACT_KINDS[key]
    except KeyError:
        raise KeyError(
            f"Unknown artifact kind '{key}'. Supported: {', '.join(supported_kinds())}"
        ) from None
