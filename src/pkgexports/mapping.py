"""Resolution of a single export mapping against an active condition set."""

from __future__ import annotations

import logging
from typing import Any, Mapping

from pkgexports.errors import InvalidConditionError
from pkgexports.types import ConditionSet, ExportMapping, Resolution

logger = logging.getLogger(__name__)

__all__ = ["resolve_mapping"]


def resolve_mapping(
    mapping: ExportMapping, conditions: ConditionSet, package_name: str | None = None
) -> Resolution:
    """Resolve an export mapping to the paths it selects.

    Args:
        mapping: ``None``, a path string, a fallback list or a conditions mapping.
        conditions: The active condition names.
        package_name: Package name used in error messages.

    Returns:
        ``EXCLUDED`` for an explicit ``None`` target, ``EMPTY`` when no
        condition was satisfied, otherwise ``FOUND`` with the paths in order.

    Raises:
        InvalidConditionError: If a conditions mapping holds a path pattern key.
    """
    if mapping is None:
        return Resolution.excluded()
    if isinstance(mapping, str):
        return Resolution.found((mapping,))
    if isinstance(mapping, (list, tuple)):
        return _resolve_fallbacks(mapping, conditions, package_name)
    if isinstance(mapping, Mapping):
        return _resolve_conditions(mapping, conditions, package_name)

    logger.warning(
        "Ignoring export mapping of type %s in '%s' package",
        type(mapping).__name__,
        package_name,
    )
    return Resolution.empty()


def _resolve_fallbacks(
    items: list[Any] | tuple[Any, ...], conditions: ConditionSet, package_name: str | None
) -> Resolution:
    """Concatenate the paths of every item; a None item excludes the whole list."""
    paths: list[str] = []
    for item in items:
        resolved = resolve_mapping(item, conditions, package_name)
        if resolved.is_excluded:
            return resolved
        if resolved.is_found:
            paths.extend(resolved.paths)
    if not paths:
        return Resolution.empty()
    return Resolution.found(paths)


def _resolve_conditions(
    mapping: Mapping[str, Any], conditions: ConditionSet, package_name: str | None
) -> Resolution:
    """Return the first satisfied condition's result, in declaration order."""
    for condition, target in mapping.items():
        if condition in conditions:
            resolved = resolve_mapping(target, conditions, package_name)
            if not resolved.is_empty:
                return resolved
        elif condition.startswith("."):
            raise InvalidConditionError(condition=condition, package_name=package_name)
    return Resolution.empty()
