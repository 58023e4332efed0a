"""
Template renderer — fill ``<%= ... %>`` tokens in file templates.

Two token forms are recognized:

    <%= classify(name) %>   name transform (classify, dasherize, camelize)
    <%= importPath %>       plain variable passed by the caller

Anything else is left in place untouched.
"""

from __future__ import annotations

import re
from typing import Callable

from cqrs_scaffold.core.services.naming import camelize, classify, dasherize

_TRANSFORM_RE = re.compile(r"<%= (\w+)\((\w+)\) %>")
_VARIABLE_RE = re.compile(r"<%= (\w+) %>")

TRANSFORMS: dict[str, Callable[[str], str]] = {
    "classify": classify,
    "dasherize": dasherize,
    "camelize": camelize,
}


def render_template(template: str, name: str, **variables: str) -> str:
    """Render *template* for the artifact *name*.

    Args:
        template: Template text.
        name: Base name fed to the transform tokens.
        **variables: Values for plain ``<%= var %>`` tokens.
    """

    def _transform(match: re.Match[str]) -> str:
        fn, arg = match.group(1), match.group(2)
        if arg == "name" and fn in TRANSFORMS:
            return TRANSFORMS[fn](name)
        return match.group(0)

    def _variable(match: re.Match[str]) -> str:
        return variables.get(match.group(1), match.group(0))

    rendered = _VARIABLE_RE.sub(_variable, template)
    return _TRANSFORM_RE.sub(_transform, rendered)
