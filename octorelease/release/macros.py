"""Build-variable substitution in argument tokens.

Recognised forms:

- ``${NAME}``: any name up to the closing brace
- ``$NAME``: letters, digits and underscores
- ``$$``: a literal ``$``

Unknown names are left untouched. Substituted values are not scanned again,
so a value containing ``$X`` is inserted literally.
"""

from __future__ import annotations

import re
from collections.abc import Iterable, Mapping

__all__ = ["expand_all", "replace_macro"]

_VARIABLE = re.compile(r"\$([A-Za-z0-9_]+|\{[^}]+\}|\$)")


def replace_macro(text: str, variables: Mapping[str, str]) -> str:
    """Replace variable references in ``text`` with values from ``variables``."""

    def _resolve(match: re.Match[str]) -> str:
        key = match.group(1)
        if key == "$":
            return "$"
        if key.startswith("{"):
            key = key[1:-1]
        value = variables.get(key)
        return match.group(0) if value is None else value

    return _VARIABLE.sub(_resolve, text)


def expand_all(
    tokens: Iterable[str],
    environment: Mapping[str, str],
    variables: Mapping[str, str],
) -> list[str]:
    """Expand each token against ``environment`` first, then ``variables``."""
    return [replace_macro(replace_macro(token, environment), variables) for token in tokens]
