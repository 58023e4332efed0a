"""
Configuration loader — reads cqrs-scaffold.yml into a ScaffoldConfig.

The file is optional. Without one every default applies and the
working directory is the project root.
"""

from __future__ import annotations

import logging
from pathlib import Path

import yaml

from cqrs_scaffold.core.models.config import ScaffoldConfig

logger = logging.getLogger(__name__)

# Default config filename
CONFIG_FILE = "cqrs-scaffold.yml"


class ConfigError(Exception):
    """Raised when the scaffold configuration is invalid or unreadable."""


def find_config_file(start_dir: Path | None = None) -> Path | None:
    """Search for cqrs-scaffold.yml starting from the given directory, walking up.

    Args:
        start_dir: Directory to start searching from (default: cwd).

    Returns:
        Path to the config file, or None if not found.
    """
    current = (start_dir or Path.cwd()).resolve()

    for _ in range(20):  # safety limit
        candidate = current / CONFIG_FILE
        if candidate.is_file():
            return candidate
        parent = current.parent
        if parent == current:
            break  # filesystem root
        current = parent

    return None


def load_config(path: Path | None = None) -> ScaffoldConfig:
    """Load and validate the scaffold configuration.

    Args:
        path: Explicit config path. If None, searches upward; a missing
            file yields the defaults.

    Raises:
        ConfigError: If an explicit file is missing, or any file is invalid.
    """
    if path is None:
        path = find_config_file()
        if path is None:
            logger.debug("No %s found, using defaults", CONFIG_FILE)
            return ScaffoldConfig()

    if not path.is_file():
        raise ConfigError(f"Config file not found: {path}")

    logger.debug("Loading scaffold config from %s", path)

    try:
        raw = path.read_text(encoding="utf-8")
    except OSError as e:
        raise ConfigError(f"Cannot read {path}: {e}") from e

    try:
        data = yaml.safe_load(raw)
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in {path}: {e}") from e

    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise ConfigError(f"Expected a YAML mapping in {path}, got {type(data).__name__}")

    # The YAML may wrap everything under a "scaffold" key or be flat
    section = data.get("scaffold", data)
    if not isinstance(section, dict):
        raise ConfigError(f"Expected 'scaffold' to be a mapping in {path}")

    try:
        config = ScaffoldConfig.model_validate(section)
    except Exception as e:
        raise ConfigError(f"Invalid scaffold configuration: {e}") from e

    logger.info("Loaded scaffold config from %s (source_root=%s)", path, config.source_root)
    return config


def project_root(config_path: Path | None) -> Path:
    """Project root: the config file's directory, or the cwd without one."""
    if config_path is None:
        return Path.cwd()
    return config_path.parent.resolve()
