"""
Artifact kind — the descriptor that parameterizes the generation pipeline.

Commands and queries differ only in naming and templates, so a single
pipeline is driven by one of these per kind.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class ArtifactKind(BaseModel):
    """What to generate for one CQRS artifact kind.

    Attributes:
        key:               Kind identifier ("command", "query").
        class_suffix:      Suffix of the generated class ("Command").
        file_suffix:       Middle part of the file name (<name>.<file_suffix>.ts).
        artifact_template: Template for the command/query class + payload.
        handler_template:  Template for the handler stub.
    """

    model_config = ConfigDict(frozen=True)

    key: str
    class_suffix: str
    file_suffix: str
    artifact_template: str
    handler_template: str

    @property
    def label(self) -> str:
        """Human-readable kind name, e.g. "Command"."""
        return self.class_suffix

    def import_path(self, name: str, flat: bool) -> str:
        """Path the handler uses to import the artifact class."""
        if flat:
            return f"./{name}.{self.file_suffix}"
        return f"../impl/{name}.{self.file_suffix}"
