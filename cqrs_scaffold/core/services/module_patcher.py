"""
Module patcher — idempotent text surgery on NestJS module files.

This is not a TypeScript parser. It works on files of this shape:

    import { Module } from '@nestjs/common';
    import { CqrsModule } from '@nestjs/cqrs';

    @Module({
      imports: [CqrsModule],
      providers: [
        FirstHandler,
        SecondHandler,
      ],
    })
    export class UsersModule {}

Preconditions:
  - imports use ``import ... from '...'`` (single or multi-line)
  - the first ``providers: [ ... ]`` array holds no nested ``]``
  - entries carry no trailing comments

Every transform is additive. Existing lines are kept byte-for-byte,
except that a missing trailing comma may be added to the last provider.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass

logger = logging.getLogger(__name__)


_IMPORT_RE = re.compile(
    r"^[ \t]*import\b(?P<clause>[^;'\"]*?)\bfrom\s+(['\"])[^'\"\n]+\2[ \t]*;?",
    re.MULTILINE,
)

_PROVIDERS_RE = re.compile(
    r"\bproviders\s*:\s*\[(?P<body>.*?)\]",
    re.DOTALL,
)


class ProvidersNotFoundError(Exception):
    """Raised when a module file has no ``providers: [...]`` array."""


@dataclass
class PatchResult:
    """Outcome of patching one module file's content."""

    content: str
    import_added: bool = False
    provider_added: bool = False

    @property
    def changed(self) -> bool:
        return self.import_added or self.provider_added


def _contains_word(text: str, word: str) -> bool:
    return re.search(rf"(?<![\w$]){re.escape(word)}(?![\w$])", text) is not None


def _line_indent(content: str, pos: int) -> str:
    """Leading whitespace of the line containing *pos*."""
    start = content.rfind("\n", 0, pos) + 1
    line = content[start:pos]
    return line[: len(line) - len(line.lstrip(" \t"))]


def _entry_indent(body: str) -> str | None:
    """Indentation used by existing entries on their own lines, if any."""
    for line in reversed(body.split("\n")[1:]):
        if line.strip():
            return line[: len(line) - len(line.lstrip(" \t"))]
    return None


def has_providers_array(content: str) -> bool:
    """Check whether content holds a bracketed ``providers`` list."""
    return _PROVIDERS_RE.search(content) is not None


def is_imported(content: str, symbol: str) -> bool:
    """Check whether an import statement already brings in *symbol*."""
    return any(_contains_word(m.group("clause"), symbol) for m in _IMPORT_RE.finditer(content))


def is_registered(content: str, identifier: str) -> bool:
    """Check whether *identifier* already sits in the providers array."""
    match = _PROVIDERS_RE.search(content)
    return match is not None and _contains_word(match.group("body"), identifier)


def add_import_statement(content: str, statement: str, symbol: str | None = None) -> str:
    """Insert *statement* after the last import, or at the top of the file.

    Returns content unchanged when the exact statement is present, or
    when *symbol* is given and some import already brings it in.
    """
    if statement in content or (symbol and is_imported(content, symbol)):
        return content

    imports = list(_IMPORT_RE.finditer(content))
    if not imports:
        return f"{statement}\n{content}"

    # after the whole line, so trailing comments stay on their import
    end = content.find("\n", imports[-1].end())
    if end == -1:
        end = len(content)
    return f"{content[:end]}\n{statement}{content[end:]}"


def add_provider_entry(content: str, identifier: str) -> str:
    """Append *identifier* to the providers array.

    No-op if the identifier is already registered. The new entry goes on
    its own line, indented like its siblings, and the closing bracket
    keeps its position on its own line.

    Raises:
        ProvidersNotFoundError: If there is no providers array.
    """
    match = _PROVIDERS_RE.search(content)
    if match is None:
        raise ProvidersNotFoundError("No providers array found")

    body = match.group("body")
    if _contains_word(body, identifier):
        return content

    kept = body.rstrip()
    trailing = body[len(kept):]
    line_indent = _line_indent(content, match.start())

    if "\n" in trailing:
        closing = trailing[trailing.rfind("\n"):]
    else:
        closing = f"\n{line_indent}"

    indent = _entry_indent(kept)
    if indent is None:
        indent = f"{line_indent}  " if line_indent else "    "

    separator = "," if kept.strip() and not kept.endswith(",") else ""
    new_body = f"{kept}{separator}\n{indent}{identifier},{closing}"

    return content[: match.start("body")] + new_body + content[match.end("body"):]


def patch_module_content(content: str, class_name: str, import_path: str) -> PatchResult:
    """Import and register *class_name* in a module file's content.

    Applying this twice with the same arguments gives the same result as
    applying it once. A class already in the providers array (directly or
    as a namespace member such as ``handlers.X``) leaves content untouched,
    even without a matching import.

    Raises:
        ProvidersNotFoundError: If there is no providers array. Nothing
            is changed in that case.
    """
    if not has_providers_array(content):
        raise ProvidersNotFoundError("No providers array found")

    if is_registered(content, class_name):
        return PatchResult(content=content)

    statement = f"import {{ {class_name} }} from '{import_path}';"

    updated = add_import_statement(content, statement, symbol=class_name)
    import_added = updated != content

    registered = add_provider_entry(updated, class_name)
    provider_added = registered != updated

    logger.debug(
        "Patched %s: import_added=%s provider_added=%s",
        class_name, import_added, provider_added,
    )
    return PatchResult(
        content=registered,
        import_added=import_added,
        provider_added=provider_added,
    )
