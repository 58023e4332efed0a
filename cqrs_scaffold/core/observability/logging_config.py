"""
Logging for cqrs-scaffold — process setup and diagnostic routing.

``setup_logging()`` runs once per CLI invocation. Core modules log through
``logging.getLogger(__name__)`` at debug/info level only; user-facing
warnings travel as ``Diagnostic`` values and reach the console through
``log_diagnostics()``, on the ``cqrs_scaffold.diagnostics`` logger.

Level precedence:
    --debug / --verbose / --quiet  >  CQRS_SCAFFOLD_LOG_LEVEL  >  WARNING
"""

from __future__ import annotations

import logging
import os
import sys
from collections.abc import Iterable

from cqrs_scaffold.core.models.generation import Diagnostic

DIAGNOSTICS_LOGGER = "cqrs_scaffold.diagnostics"

ENV_LEVEL = "CQRS_SCAFFOLD_LOG_LEVEL"
ENV_FILE = "CQRS_SCAFFOLD_LOG_FILE"
ENV_FILE_LEVEL = "CQRS_SCAFFOLD_LOG_FILE_LEVEL"

_DIAGNOSTIC_LEVELS = {
    "info": logging.INFO,
    "warning": logging.WARNING,
}

_FILE_FORMAT = "%(asctime)s %(levelname)-5s %(name)s:%(lineno)d — %(message)s"


class ConsoleFormatter(logging.Formatter):
    """Console output keyed to the CLI's icon style.

    At WARNING and above the record's message is shown alone, prefixed
    with an icon. At INFO the logger name is added so ``-v`` shows where
    a line came from; at DEBUG the source line is added as well.
    """

    _ICONS = {
        logging.WARNING: "   ⚠️  ",
        logging.ERROR: "❌ ",
        logging.CRITICAL: "❌ ",
    }

    def __init__(self, level: int) -> None:
        if level <= logging.DEBUG:
            fmt = "%(asctime)s %(levelname)-5s %(name)s:%(lineno)d — %(message)s"
        elif level <= logging.INFO:
            fmt = "%(asctime)s [%(name)s] %(message)s"
        else:
            fmt = "%(message)s"
        super().__init__(fmt, datefmt="%H:%M:%S")
        self._plain = level > logging.INFO

    def format(self, record: logging.LogRecord) -> str:
        text = super().format(record)
        if self._plain:
            return self._ICONS.get(record.levelno, "") + text
        return text


def parse_level(level: str | None) -> int:
    """Convert a level name to its numeric value, WARNING if unknown."""
    if not level:
        return logging.WARNING
    numeric = getattr(logging, level.upper(), None)
    return numeric if isinstance(numeric, int) else logging.WARNING


def resolve_level(*, debug: bool = False, verbose: bool = False, quiet: bool = False) -> str:
    """Pick the console level name from CLI flags, then the environment."""
    if debug:
        return "DEBUG"
    if verbose:
        return "INFO"
    if quiet:
        return "ERROR"
    return os.environ.get(ENV_LEVEL, "WARNING")


def setup_logging(
    level: str = "WARNING",
    log_file: str | None = None,
    log_file_level: str | None = None,
) -> None:
    """Install the console handler (stderr) and an optional file handler.

    Replaces any handlers already on the root logger, so calling it again
    in the same process reconfigures rather than duplicates output.
    """
    console_level = parse_level(level)

    console = logging.StreamHandler(sys.stderr)
    console.setLevel(console_level)
    console.setFormatter(ConsoleFormatter(console_level))

    root = logging.getLogger()
    root.handlers.clear()
    root.addHandler(console)
    root_level = console_level

    if log_file:
        file_level = parse_level(log_file_level) if log_file_level else console_level
        root_level = min(root_level, file_level)

        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setLevel(file_level)
        file_handler.setFormatter(logging.Formatter(_FILE_FORMAT, datefmt="%Y-%m-%d %H:%M:%S"))
        root.addHandler(file_handler)

    root.setLevel(root_level)
    logging.raiseExceptions = False


def log_diagnostics(diagnostics: Iterable[Diagnostic], logger: logging.Logger | None = None) -> None:
    """Emit each diagnostic as a log record at its own level.

    The diagnostic's kind and path ride along on the record as
    ``diagnostic_kind`` and ``diagnostic_path``.
    """
    log = logger or logging.getLogger(DIAGNOSTICS_LOGGER)
    for diag in diagnostics:
        log.log(
            _DIAGNOSTIC_LEVELS[diag.level],
            "%s",
            diag.message,
            extra={"diagnostic_kind": diag.kind, "diagnostic_path": diag.path},
        )
