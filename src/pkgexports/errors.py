"""Error hierarchy for the pkgexports resolver."""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Any

__all__ = [
    "ExportsError",
    "ConfigNotFoundError",
    "ConfigError",
    "InvalidInputError",
    "InvalidPathPatternError",
    "InvalidConditionError",
    "MissingExportError",
    "NoMatchingConditionError",
    "ErrorCodes",
]


class ExportsError(Exception):
    """Base error for all pkgexports errors."""

    def __init__(
        self,
        code: str,
        message: str,
        details: dict[str, Any] | None = None,
        cause: Exception | None = None,
    ) -> None:
        super().__init__(message)
        self.code = code
        self.message = message
        self.details: dict[str, Any] = details or {}
        self.cause = cause
        self.timestamp = datetime.now(timezone.utc).isoformat()

    def __str__(self) -> str:
        return f"[{self.code}] {self.message}"


class ConfigNotFoundError(ExportsError):
    """Raised when a configuration file cannot be found."""

    def __init__(self, config_path: str, **kwargs: Any) -> None:
        super().__init__(
            code="CONFIG_NOT_FOUND",
            message=f"Configuration file not found: {config_path}",
            details={"config_path": config_path},
            **kwargs,
        )


class ConfigError(ExportsError):
    """Raised when configuration is invalid."""

    def __init__(self, message: str, **kwargs: Any) -> None:
        super().__init__(code="CONFIG_INVALID", message=message, **kwargs)


class InvalidInputError(ExportsError):
    """Raised for invalid input."""

    def __init__(self, message: str = "Invalid input", **kwargs: Any) -> None:
        super().__init__(code="GENERAL_INVALID_INPUT", message=message, **kwargs)


class InvalidPathPatternError(ExportsError):
    """Raised when a key of a path-pattern map does not start with '.'."""

    def __init__(self, pattern: str, package_name: str | None, **kwargs: Any) -> None:
        super().__init__(
            code="INVALID_PATH_PATTERN",
            message=f'Invalid path pattern "{pattern}" in "{package_name}" package',
            details={"pattern": pattern, "package_name": package_name},
            **kwargs,
        )

    @property
    def pattern(self) -> str:
        """The offending pattern key."""
        return self.details["pattern"]


class InvalidConditionError(ExportsError):
    """Raised when a conditions object contains a path pattern key."""

    def __init__(self, condition: str, package_name: str | None, **kwargs: Any) -> None:
        super().__init__(
            code="INVALID_CONDITION",
            message=f'Invalid condition "{condition}" in "{package_name}" package',
            details={"condition": condition, "package_name": package_name},
            **kwargs,
        )

    @property
    def condition(self) -> str:
        """The offending condition key."""
        return self.details["condition"]


class MissingExportError(ExportsError):
    """Raised in strict mode when no export matches the entry."""

    def __init__(self, entry: str, package_name: str | None, **kwargs: Any) -> None:
        super().__init__(
            code="MISSING_EXPORT",
            message=f'Missing "{entry}" export in "{package_name}" package',
            details={"entry": entry, "package_name": package_name},
            **kwargs,
        )

    @property
    def entry(self) -> str:
        """The entry specifier that could not be resolved."""
        return self.details["entry"]


class NoMatchingConditionError(ExportsError):
    """Raised in strict mode when an export matched but none of its conditions did."""

    def __init__(self, entry: str, package_name: str | None, **kwargs: Any) -> None:
        super().__init__(
            code="NO_MATCHING_CONDITION",
            message=f'No known conditions for "{entry}" entry in "{package_name}" package',
            details={"entry": entry, "package_name": package_name},
            **kwargs,
        )

    @property
    def entry(self) -> str:
        """The entry specifier whose conditions were all unmet."""
        return self.details["entry"]


class ErrorCodes:
    """All error codes as constants.

    Example:
        if error.code == ErrorCodes.MISSING_EXPORT:
            try_next_specifier()
    """

    CONFIG_NOT_FOUND = "CONFIG_NOT_FOUND"
    CONFIG_INVALID = "CONFIG_INVALID"
    GENERAL_INVALID_INPUT = "GENERAL_INVALID_INPUT"
    INVALID_PATH_PATTERN = "INVALID_PATH_PATTERN"
    INVALID_CONDITION = "INVALID_CONDITION"
    MISSING_EXPORT = "MISSING_EXPORT"
    NO_MATCHING_CONDITION = "NO_MATCHING_CONDITION"

    def __setattr__(self, name: str, value: object) -> None:
        raise AttributeError("ErrorCodes is immutable")
