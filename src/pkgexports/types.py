"""Type definitions and data structures for export map resolution."""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum
from typing import Any, Mapping, Union

__all__ = [
    "ExportMapping",
    "PackageExports",
    "ConditionSet",
    "ResolutionKind",
    "Resolution",
    "CompiledPattern",
    "CacheStats",
]

# None | str | list[ExportMapping] | Mapping[str, ExportMapping]
ExportMapping = Union[None, str, list[Any], tuple[Any, ...], Mapping[str, Any]]

# Either a single mapping for "." or a mapping keyed by path pattern or condition.
PackageExports = Union[ExportMapping, Mapping[str, ExportMapping]]

ConditionSet = frozenset[str]


class ResolutionKind(str, Enum):
    """Outcome of resolving one export mapping."""

    EXCLUDED = "excluded"
    EMPTY = "empty"
    FOUND = "found"


@dataclass(frozen=True)
class Resolution:
    """Result of resolving an export mapping against a condition set.

    ``EXCLUDED`` means the mapping explicitly disallows the entry (a ``null``
    target) and must abort the enclosing resolution. ``EMPTY`` means no
    condition was satisfied, which lets sibling patterns still be tried.
    """

    kind: ResolutionKind
    paths: tuple[str, ...] = ()

    @classmethod
    def excluded(cls) -> Resolution:
        return _EXCLUDED

    @classmethod
    def empty(cls) -> Resolution:
        return _EMPTY

    @classmethod
    def found(cls, paths: tuple[str, ...] | list[str]) -> Resolution:
        return cls(ResolutionKind.FOUND, tuple(paths))

    @property
    def is_excluded(self) -> bool:
        return self.kind is ResolutionKind.EXCLUDED

    @property
    def is_empty(self) -> bool:
        return self.kind is ResolutionKind.EMPTY

    @property
    def is_found(self) -> bool:
        return self.kind is ResolutionKind.FOUND


_EXCLUDED = Resolution(ResolutionKind.EXCLUDED)
_EMPTY = Resolution(ResolutionKind.EMPTY)


@dataclass(frozen=True)
class CompiledPattern:
    """A path-pattern key compiled into a matcher, paired with its mapping.

    Attributes:
        key: The pattern key as declared in the export map.
        matcher: Anchored regular expression with one group per wildcard.
        mapping: The export mapping declared for ``key``.
        prefix: Static part of the normalized key before the first wildcard.
        normalized: The key with a trailing "/" rewritten to "/*".
    """

    key: str
    matcher: re.Pattern[str]
    mapping: ExportMapping
    prefix: str
    normalized: str

    @property
    def is_exact(self) -> bool:
        """Whether the pattern has no wildcard slots."""
        return self.matcher.groups == 0


@dataclass
class CacheStats:
    """Counters reported by a pattern cache."""

    hits: int = 0
    misses: int = 0
    evictions: int = 0
    size: int = 0
    max_entries: int = 0
