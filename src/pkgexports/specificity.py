"""Specificity ranking between competing path patterns."""

from __future__ import annotations

from pkgexports.types import CompiledPattern

__all__ = ["compare_specificity", "is_more_specific"]


def compare_specificity(a: CompiledPattern, b: CompiledPattern) -> int:
    """Compare two matching patterns by specificity.

    Ordering rules, applied in turn:
        1. A longer static prefix wins.
        2. At equal prefix length, a pattern without wildcards wins.
        3. A longer normalized key wins, so "./foo/" and "./foo/*" tie.

    Returns:
        A positive number if ``a`` is more specific, negative if ``b`` is,
        and 0 when they are tied.
    """
    if len(a.prefix) != len(b.prefix):
        return len(a.prefix) - len(b.prefix)
    if a.is_exact != b.is_exact:
        return 1 if a.is_exact else -1
    return len(a.normalized) - len(b.normalized)


def is_more_specific(candidate: CompiledPattern, current: CompiledPattern) -> bool:
    """Whether ``candidate`` should replace ``current``; ties keep ``current``."""
    return compare_specificity(candidate, current) > 0
