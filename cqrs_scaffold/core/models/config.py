"""
Scaffold configuration model — loaded from cqrs-scaffold.yml.

Every field has a default, so a project without a config file behaves
exactly like one with an empty file.
"""

from __future__ import annotations

from pydantic import BaseModel, field_validator


class ScaffoldConfig(BaseModel):
    """Project-wide generation defaults.

    CLI flags override ``flat`` and ``skip_import`` per invocation.
    """

    source_root: str = "src"
    module_suffix: str = ".module.ts"
    flat: bool = False
    skip_import: bool = False

    @field_validator("source_root")
    @classmethod
    def _strip_slashes(cls, value: str) -> str:
        value = value.strip().strip("/")
        if not value:
            raise ValueError("source_root must not be empty")
        return value

    @field_validator("module_suffix")
    @classmethod
    def _non_empty_suffix(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("module_suffix must not be empty")
        return value.strip()
