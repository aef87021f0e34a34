"""Path pattern compilation and wildcard substitution for export map keys."""

from __future__ import annotations

import re
from typing import Any, Mapping, Sequence

from pkgexports.errors import InvalidPathPatternError
from pkgexports.types import CompiledPattern

__all__ = ["compile_pattern", "compile_patterns", "substitute_wildcards", "WILDCARD"]

WILDCARD = "*"

_WILDCARD_GROUP = "(.*?)"


def _expand_trailing_slash(value: str) -> str:
    """Rewrite the ``"./dir/"`` shorthand as ``"./dir/*"``."""
    if value.endswith("/"):
        return value + WILDCARD
    return value


def compile_pattern(key: str, mapping: Any, package_name: str | None = None) -> CompiledPattern:
    """Compile a path-pattern key into an anchored matcher.

    Each ``*`` captures the shortest possible span, so ``"./*.*"`` has two
    independent slots. A trailing ``/`` behaves like a trailing ``/*``.

    Args:
        key: The pattern key, which must start with ``"."``.
        mapping: The export mapping declared for the key.
        package_name: Package name used in error messages.

    Returns:
        The compiled pattern.

    Raises:
        InvalidPathPatternError: If the key does not start with ``"."``.
    """
    if not key.startswith("."):
        raise InvalidPathPatternError(pattern=key, package_name=package_name)

    normalized = _expand_trailing_slash(key)
    literals = normalized.split(WILDCARD)
    regex = _WILDCARD_GROUP.join(re.escape(part) for part in literals)

    return CompiledPattern(
        key=key,
        matcher=re.compile(regex),
        mapping=mapping,
        prefix=literals[0],
        normalized=normalized,
    )


def compile_patterns(
    exports: Mapping[str, Any], package_name: str | None = None
) -> tuple[CompiledPattern, ...]:
    """Compile every key of a path-pattern map, preserving declaration order."""
    return tuple(compile_pattern(key, mapping, package_name) for key, mapping in exports.items())


def substitute_wildcards(template: str, captures: Sequence[str]) -> str:
    """Fill the wildcards of a result template with captured slots.

    The n-th ``*`` receives the n-th capture; once captures run out the last
    one is reused. A template without wildcards is returned unchanged.
    """
    if not captures:
        return template

    pieces = _expand_trailing_slash(template).split(WILDCARD)
    if len(pieces) == 1:
        return template

    last = len(captures) - 1
    out = [pieces[0]]
    for index, piece in enumerate(pieces[1:]):
        out.append(captures[min(index, last)])
        out.append(piece)
    return "".join(out)
