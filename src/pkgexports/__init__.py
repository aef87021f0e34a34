"""pkgexports - Resolve package "exports" maps without touching the filesystem."""

from __future__ import annotations

# Core
from pkgexports.resolver import ExportsResolver, get_default_resolver, resolve_exports
from pkgexports.mapping import resolve_mapping
from pkgexports.cache import PatternCache

# Conditions
from pkgexports.conditions import DEFAULT_CONDITION, ResolveOptions, build_conditions

# Patterns
from pkgexports.specificity import compare_specificity
from pkgexports.utils.pattern import compile_pattern, substitute_wildcards

# Types
from pkgexports.types import CacheStats, CompiledPattern, Resolution, ResolutionKind

# Config
from pkgexports.config import Config

# Errors
from pkgexports.errors import (
    ConfigError,
    ConfigNotFoundError,
    ErrorCodes,
    ExportsError,
    InvalidConditionError,
    InvalidInputError,
    InvalidPathPatternError,
    MissingExportError,
    NoMatchingConditionError,
)

__version__ = "1.2.1"

__all__ = [
    # Core
    "resolve_exports",
    "ExportsResolver",
    "get_default_resolver",
    "resolve_mapping",
    "PatternCache",
    # Conditions
    "ResolveOptions",
    "build_conditions",
    "DEFAULT_CONDITION",
    # Patterns
    "compile_pattern",
    "compare_specificity",
    "substitute_wildcards",
    # Types
    "CacheStats",
    "CompiledPattern",
    "Resolution",
    "ResolutionKind",
    # Config
    "Config",
    # Errors
    "ErrorCodes",
    "ExportsError",
    "InvalidPathPatternError",
    "InvalidConditionError",
    "MissingExportError",
    "NoMatchingConditionError",
    "ConfigError",
    "ConfigNotFoundError",
    "InvalidInputError",
]
