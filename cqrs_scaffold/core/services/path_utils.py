"""
Path utilities — relative import paths between virtual tree locations.

Paths here are "/"-delimited tree paths, never OS paths. Empty segments
are ignored, so leading and trailing slashes don't matter.
"""

from __future__ import annotations


def _segments(path: str) -> list[str]:
    return [part for part in path.split("/") if part]


def get_parent_path(path: str, levels: int = 1) -> str:
    """Walk *levels* directories up from *path*.

    Returns a "/"-terminated path, or "" once the root is reached.

        get_parent_path("src/users/commands/", 1) → "src/users/"
        get_parent_path("src/", 1)                → ""
    """
    parts = _segments(path)
    if levels > 0:
        parts = parts[:-levels] if levels < len(parts) else []
    return "/".join(parts) + "/" if parts else ""


def get_relative_path(source_dir: str, target: str) -> str:
    """Compute the shortest relative path from a directory to a target.

    One ".." per source segment beyond the common prefix, then the rest
    of the target. Results that don't climb are prefixed with "./".

        get_relative_path("a/b/", "a/c/d") → "../c/d"
        get_relative_path("a/", "a/b")     → "./b"
    """
    source_parts = _segments(source_dir)
    target_parts = _segments(target)

    common = 0
    while (
        common < len(source_parts)
        and common < len(target_parts)
        and source_parts[common] == target_parts[common]
    ):
        common += 1

    parts = [".."] * (len(source_parts) - common) + target_parts[common:]
    result = "/".join(parts)
    return result if result.startswith("../") else f"./{result}"


def directory_of(file_path: str) -> str:
    """Return the "/"-terminated directory containing *file_path*."""
    return file_path[: file_path.rfind("/") + 1]


def handler_file_stem(normalized_path: str, name: str, flat: bool) -> str:
    """Tree path of the generated handler, without its .ts extension."""
    if flat:
        return f"{normalized_path}{name}.handler"
    return f"{normalized_path}handlers/{name}.handler"


def handler_import_path(
    module_path: str,
    normalized_path: str,
    name: str,
    flat: bool,
) -> str:
    """Import path from the module file to the generated handler.

    Args:
        module_path: Tree path of the module file.
        normalized_path: "/"-terminated generation directory.
        name: Dash-cased artifact name.
        flat: Whether the handler sits directly in normalized_path.
    """
    return get_relative_path(
        directory_of(module_path),
        handler_file_stem(normalized_path, name, flat),
    )
