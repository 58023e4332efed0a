"""
String-case helpers — the name transforms used by templates and paths.

Mirrors the framework's own string helpers so generated identifiers match
what the NestJS CLI would produce:

    decamelize("innerHTML")     → "inner_html"
    dasherize("create user")    → "create-user"
    camelize("create-user")     → "createUser"
    classify("create-user")     → "CreateUser"
"""

from __future__ import annotations

import re

_DECAMELIZE_RE = re.compile(r"([a-z\d])([A-Z])")
_DASHERIZE_RE = re.compile(r"[ _]")
_CAMELIZE_RE = re.compile(r"(-|_|\.|\s)+(.)?")
_UNDERSCORE_CAMEL_RE = re.compile(r"([a-z\d])([A-Z]+)")
_UNDERSCORE_SEP_RE = re.compile(r"-|\s+")


def decamelize(value: str) -> str:
    """Convert a camelCase string to lower snake_case."""
    return _DECAMELIZE_RE.sub(r"\1_\2", value).lower()


def dasherize(value: str) -> str:
    """Replace underscores, spaces and camel humps with dashes.

    Idempotent: ``dasherize(dasherize(x)) == dasherize(x)``.
    """
    return _DASHERIZE_RE.sub("-", decamelize(value))


def camelize(value: str) -> str:
    """Return the lowerCamelCase form of a dashed/underscored/spaced string."""
    result = _CAMELIZE_RE.sub(
        lambda m: m.group(2).upper() if m.group(2) else "", value
    )
    return result[:1].lower() + result[1:]


def capitalize(value: str) -> str:
    return value[:1].upper() + value[1:]


def classify(value: str) -> str:
    """Return the UpperCamelCase class name, keeping ``.``-separated parts."""
    return ".".join(capitalize(camelize(part)) for part in value.split("."))


def underscore(value: str) -> str:
    """Return the lower snake_case form of a string."""
    value = _UNDERSCORE_CAMEL_RE.sub(r"\1_\2", value)
    return _UNDERSCORE_SEP_RE.sub("_", value).lower()
