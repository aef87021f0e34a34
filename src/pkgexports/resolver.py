"""Entry resolution against a package's ``exports`` map.

Example usage::

    from pkgexports import resolve_exports

    pkg = {"name": "foo", "exports": {"./*": ["./*.js", "./*.cjs"]}}
    resolve_exports(pkg, "./bar")  # ["./bar.js", "./bar.cjs"]
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, Iterable, Mapping, Union

from pkgexports.cache import DEFAULT_MAX_ENTRIES, PatternCache
from pkgexports.conditions import ResolveOptions, build_conditions, coerce_options
from pkgexports.errors import ConfigError, InvalidInputError, MissingExportError, NoMatchingConditionError
from pkgexports.mapping import resolve_mapping
from pkgexports.specificity import is_more_specific
from pkgexports.types import CacheStats, CompiledPattern, ConditionSet, PackageExports, Resolution
from pkgexports.utils.pattern import substitute_wildcards

if TYPE_CHECKING:
    from pkgexports.config import Config

logger = logging.getLogger(__name__)

__all__ = ["ExportsResolver", "resolve_exports", "get_default_resolver"]

OptionsArg = Union[ResolveOptions, dict[str, Any], None]


class ExportsResolver:
    """Resolves entry specifiers against package ``exports`` maps.

    Each resolver owns a PatternCache, so compiled patterns live as long as
    the resolver (or until ``invalidate``/``clear_cache`` is called).
    """

    def __init__(
        self,
        config: Config | None = None,
        cache: PatternCache | None = None,
        options: OptionsArg = None,
    ) -> None:
        """Initialize the resolver.

        Args:
            config: Optional Config providing ``cache.*`` and ``resolve.*`` settings.
            cache: Pattern cache to use instead of a private one.
            options: Default options for calls that pass none. Takes precedence
                over ``resolve.*`` keys of ``config``.

        Raises:
            ConfigError: If ``cache.max_entries`` is not a positive integer.
        """
        if cache is None:
            max_entries = DEFAULT_MAX_ENTRIES
            if config is not None:
                max_entries = config.get("cache.max_entries", DEFAULT_MAX_ENTRIES)
                if isinstance(max_entries, bool) or not isinstance(max_entries, int) or max_entries <= 0:
                    raise ConfigError(f"cache.max_entries must be a positive integer, got {max_entries!r}")
            cache = PatternCache(max_entries=max_entries)
        self._cache = cache

        if options is not None:
            self._default_options = coerce_options(options)
        elif config is not None:
            self._default_options = ResolveOptions.from_config(config)
        else:
            self._default_options = ResolveOptions()

    @property
    def default_options(self) -> ResolveOptions:
        return self._default_options

    def resolve(
        self,
        pkg: Mapping[str, Any],
        entry: str,
        options: OptionsArg = None,
        inline_conditions: Iterable[str] | None = None,
    ) -> list[str]:
        """Resolve ``entry`` to the ordered list of candidate paths.

        Args:
            pkg: Parsed package descriptor with optional ``name`` and ``exports``.
            entry: ``"."`` or a specifier starting with ``"./"``.
            options: Per-call options; the resolver defaults apply when omitted.
            inline_conditions: Extra conditions for this call only.

        Returns:
            Candidate paths in declaration order, or an empty list when the
            entry is not exported (non-strict mode).

        Raises:
            InvalidPathPatternError: If a path-pattern map has a non-path key.
            InvalidConditionError: If a conditions object has a path key.
            MissingExportError: Strict mode only, when nothing matched.
            NoMatchingConditionError: Strict mode only, when a match had no
                satisfied condition.
        """
        opts = self._options_for(options)
        conditions = build_conditions(opts, inline_conditions)
        return self._resolve_entry(pkg, entry, conditions, opts.assert_match)

    def resolve_many(
        self,
        pkg: Mapping[str, Any],
        entries: Iterable[str],
        options: OptionsArg = None,
        inline_conditions: Iterable[str] | None = None,
    ) -> dict[str, list[str]]:
        """Resolve several entries of one package with the same conditions.

        Returns:
            Dict mapping each entry to its resolved paths, in input order.
        """
        if isinstance(entries, str):
            raise InvalidInputError(message="entries must be an iterable of strings, not a string")
        opts = self._options_for(options)
        conditions = build_conditions(opts, inline_conditions)
        return {entry: self._resolve_entry(pkg, entry, conditions, opts.assert_match) for entry in entries}

    def invalidate(self, pkg: Mapping[str, Any]) -> bool:
        """Forget the compiled patterns of ``pkg``'s export map."""
        _check_package(pkg)
        return self._cache.invalidate(pkg.get("exports"))

    def clear_cache(self) -> None:
        """Forget all compiled patterns."""
        self._cache.clear()

    def cache_stats(self) -> CacheStats:
        """Return a snapshot of the pattern cache counters."""
        return self._cache.stats()

    # ----- Internal -----

    def _options_for(self, options: OptionsArg) -> ResolveOptions:
        if options is None:
            return self._default_options
        return coerce_options(options)

    def _resolve_entry(
        self,
        pkg: Mapping[str, Any],
        entry: str,
        conditions: ConditionSet,
        assert_match: bool,
    ) -> list[str]:
        _check_package(pkg)
        if not isinstance(entry, str):
            raise InvalidInputError(message=f"entry must be a string, got {type(entry).__name__}")

        name = pkg.get("name")
        if entry != "." and not entry.startswith("./"):
            logger.debug("Rejected entry '%s' for '%s' package: not '.' or './'-relative", entry, name)
            return _missing(entry, name, assert_match)

        exports: PackageExports = pkg.get("exports")
        if not isinstance(exports, Mapping) or not exports:
            # The package declares its root entry directly.
            if entry != ".":
                return _missing(entry, name, assert_match)
            return _finish_exact(resolve_mapping(exports or None, conditions, name), entry, name, assert_match)

        first_key = next(iter(exports))
        if not first_key.startswith("."):
            # A conditions object for the root entry only.
            if entry != ".":
                return _missing(entry, name, assert_match)
            return _finish_exact(resolve_mapping(exports, conditions, name), entry, name, assert_match)

        return self._resolve_patterns(exports, entry, name, conditions, assert_match)

    def _resolve_patterns(
        self,
        exports: Mapping[str, Any],
        entry: str,
        name: str | None,
        conditions: ConditionSet,
        assert_match: bool,
    ) -> list[str]:
        patterns = self._cache.get_or_compile(exports, name)

        best: tuple[CompiledPattern, tuple[str, ...], Resolution] | None = None
        excluded_by: str | None = None
        unmet = False

        for pattern in patterns:
            match = pattern.matcher.fullmatch(entry)
            if match is None:
                continue

            # After an exclusion only an exact key can still change the outcome.
            if excluded_by is not None and not pattern.is_exact:
                continue

            resolved = resolve_mapping(pattern.mapping, conditions, name)

            # An exact match always ends the scan.
            if pattern.is_exact:
                logger.debug("Entry '%s' matched exact pattern '%s' in '%s' package", entry, pattern.key, name)
                return _finish_exact(resolved, entry, name, assert_match)

            if resolved.is_excluded:
                if excluded_by is None:
                    excluded_by = pattern.key
                continue
            if resolved.is_empty:
                unmet = True
                continue

            if best is None or is_more_specific(pattern, best[0]):
                best = (pattern, match.groups(), resolved)

        if excluded_by is not None:
            logger.debug("Entry '%s' excluded by pattern '%s' in '%s' package", entry, excluded_by, name)
            return _missing(entry, name, assert_match)

        if best is None:
            if unmet and assert_match:
                raise NoMatchingConditionError(entry=entry, package_name=name)
            return _missing(entry, name, assert_match)

        pattern, captures, resolved = best
        logger.debug("Entry '%s' matched pattern '%s' in '%s' package", entry, pattern.key, name)
        return [substitute_wildcards(path, captures) for path in resolved.paths]


def _check_package(pkg: Any) -> None:
    if not isinstance(pkg, Mapping):
        raise InvalidInputError(message=f"pkg must be a mapping, got {type(pkg).__name__}")


def _finish_exact(resolved: Resolution, entry: str, name: str | None, assert_match: bool) -> list[str]:
    """Turn the resolution of an exact match into the final result."""
    if resolved.is_excluded:
        return _missing(entry, name, assert_match)
    if resolved.is_empty:
        if assert_match:
            raise NoMatchingConditionError(entry=entry, package_name=name)
        return []
    return list(resolved.paths)


def _missing(entry: str, name: str | None, assert_match: bool) -> list[str]:
    if assert_match:
        raise MissingExportError(entry=entry, package_name=name)
    return []


_default_resolver = ExportsResolver()


def get_default_resolver() -> ExportsResolver:
    """Return the process-wide resolver used by ``resolve_exports``."""
    return _default_resolver


def resolve_exports(
    pkg: Mapping[str, Any],
    entry: str,
    options: OptionsArg = None,
    inline_conditions: Iterable[str] | None = None,
) -> list[str]:
    """Resolve ``entry`` against ``pkg["exports"]`` using the default resolver.

    See ``ExportsResolver.resolve`` for arguments and errors.
    """
    return _default_resolver.resolve(pkg, entry, options, inline_conditions)
