"""
Config check use case — validate cqrs-scaffold.yml and report issues.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

from cqrs_scaffold.core.config.loader import ConfigError, find_config_file, load_config
from cqrs_scaffold.core.models.config import ScaffoldConfig


@dataclass
class ConfigCheckResult:
    """Result of configuration validation."""

    valid: bool = False
    config: ScaffoldConfig | None = None
    config_path: Path | None = None
    errors: list[str] = field(default_factory=list)
    warnings: list[str] = field(default_factory=list)

    def to_dict(self) -> dict:
        return {
            "valid": self.valid,
            "config_path": str(self.config_path) if self.config_path else None,
            "errors": self.errors,
            "warnings": self.warnings,
            "config": self.config.model_dump() if self.config else None,
        }


def check_config(config_path: Path | None = None) -> ConfigCheckResult:
    """Validate the scaffold configuration and report issues.

    Args:
        config_path: Optional explicit path to cqrs-scaffold.yml.
    """
    result = ConfigCheckResult()

    if config_path is None:
        config_path = find_config_file()
    result.config_path = config_path

    try:
        config = load_config(config_path)
    except ConfigError as e:
        result.errors.append(str(e))
        return result

    result.config = config

    if config_path is None:
        result.warnings.append("No cqrs-scaffold.yml found. Using defaults.")
    else:
        source_dir = config_path.parent / config.source_root
        if not source_dir.is_dir():
            result.warnings.append(
                f"Source root '{config.source_root}' does not exist under {config_path.parent}"
            )

    if not config.module_suffix.endswith(".ts"):
        result.warnings.append(
            f"module_suffix '{config.module_suffix}' does not end in .ts"
        )

    result.valid = True
    return result
