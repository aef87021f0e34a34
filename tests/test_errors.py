"""Tests for the error hierarchy."""

from __future__ import annotations

import pytest

from pkgexports.errors import (
    ConfigError,
    ErrorCodes,
    ExportsError,
    InvalidConditionError,
    InvalidPathPatternError,
    MissingExportError,
    NoMatchingConditionError,
)


class TestExportsError:
    def test_str_includes_code(self) -> None:
        err = ExportsError(code="X", message="boom")
        assert str(err) == "[X] boom"

    def test_defaults(self) -> None:
        err = ExportsError(code="X", message="boom")
        assert err.details == {}
        assert err.cause is None
        assert err.timestamp.endswith("+00:00")

    def test_cause_is_kept(self) -> None:
        cause = ValueError("inner")
        err = ConfigError("outer", cause=cause)
        assert err.cause is cause


class TestResolutionErrors:
    @pytest.mark.parametrize(
        "error, code",
        [
            (InvalidPathPatternError(pattern="import", package_name="foo"), ErrorCodes.INVALID_PATH_PATTERN),
            (InvalidConditionError(condition="./bar", package_name="foo"), ErrorCodes.INVALID_CONDITION),
            (MissingExportError(entry="./x", package_name="foo"), ErrorCodes.MISSING_EXPORT),
            (NoMatchingConditionError(entry="./x", package_name="foo"), ErrorCodes.NO_MATCHING_CONDITION),
        ],
    )
    def test_codes(self, error: ExportsError, code: str) -> None:
        assert error.code == code
        assert isinstance(error, ExportsError)

    def test_unnamed_package(self) -> None:
        err = MissingExportError(entry="./x", package_name=None)
        assert err.message == 'Missing "./x" export in "None" package'


class TestErrorCodes:
    def test_immutable(self) -> None:
        with pytest.raises(AttributeError):
            ErrorCodes().MISSING_EXPORT = "other"  # type: ignore[misc]
