"""Tests for resolve_mapping()."""

from __future__ import annotations

import logging
from types import MappingProxyType

import pytest

from pkgexports.errors import InvalidConditionError
from pkgexports.mapping import resolve_mapping
from pkgexports.types import Resolution, ResolutionKind

IMPORT_DEV = frozenset({"import", "module", "development", "default"})
REQUIRE_DEV = frozenset({"require", "development", "default"})


class TestScalarMappings:
    def test_none_is_excluded(self) -> None:
        assert resolve_mapping(None, IMPORT_DEV).is_excluded

    def test_string_is_found(self) -> None:
        result = resolve_mapping("./foo.js", IMPORT_DEV)
        assert result == Resolution(ResolutionKind.FOUND, ("./foo.js",))

    def test_unknown_type_is_empty_and_logged(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.WARNING, logger="pkgexports.mapping"):
            result = resolve_mapping(42, IMPORT_DEV, "foo")
        assert result.is_empty
        assert "Ignoring export mapping of type int in 'foo' package" in caplog.text


class TestFallbackArrays:
    def test_concatenates_in_order(self) -> None:
        result = resolve_mapping(["./a.js", "./b.js"], IMPORT_DEV)
        assert result.paths == ("./a.js", "./b.js")

    def test_none_item_excludes_whole_array(self) -> None:
        assert resolve_mapping(["./a.js", None], IMPORT_DEV).is_excluded

    def test_excluded_nested_condition_excludes_array(self) -> None:
        assert resolve_mapping([{"import": None}, "./bar.cjs"], IMPORT_DEV).is_excluded
        assert resolve_mapping([{"import": None}, "./bar.cjs"], REQUIRE_DEV).paths == ("./bar.cjs",)

    def test_all_empty_is_empty(self) -> None:
        assert resolve_mapping([{"require": "./a.cjs"}], IMPORT_DEV).is_empty
        assert resolve_mapping([], IMPORT_DEV).is_empty

    def test_skips_empty_items(self) -> None:
        result = resolve_mapping([{"require": "./a.cjs"}, "./a.js"], IMPORT_DEV)
        assert result.paths == ("./a.js",)


class TestConditionalMappings:
    def test_first_satisfied_condition_wins(self) -> None:
        mapping = {"import": "./a.mjs", "default": "./a.cjs"}
        assert resolve_mapping(mapping, IMPORT_DEV).paths == ("./a.mjs",)
        assert resolve_mapping(mapping, REQUIRE_DEV).paths == ("./a.cjs",)

    def test_declaration_order_not_set_order(self) -> None:
        mapping = {"default": "./a.cjs", "import": "./a.mjs"}
        assert resolve_mapping(mapping, IMPORT_DEV).paths == ("./a.cjs",)

    def test_nested_miss_falls_through(self) -> None:
        mapping = {"import": {"production": "./a.prod.mjs"}, "default": "./a.cjs"}
        assert resolve_mapping(mapping, IMPORT_DEV).paths == ("./a.cjs",)

    def test_excluded_stops_iteration(self) -> None:
        mapping = {"import": None, "default": "./bar.cjs"}
        assert resolve_mapping(mapping, IMPORT_DEV).is_excluded

    def test_no_satisfied_condition_is_empty(self) -> None:
        result = resolve_mapping({"browser": "./b.js"}, IMPORT_DEV)
        assert result.is_empty
        assert not result.is_excluded

    def test_path_key_raises(self) -> None:
        with pytest.raises(InvalidConditionError) as exc_info:
            resolve_mapping({"./bar": "./bar.cjs"}, IMPORT_DEV, "foo")
        assert exc_info.value.condition == "./bar"

    def test_path_key_after_match_is_not_reached(self) -> None:
        mapping = {"default": "./a.js", "./bar": "./bar.js"}
        assert resolve_mapping(mapping, IMPORT_DEV).paths == ("./a.js",)

    def test_conditions_inside_arrays_inside_conditions(self) -> None:
        mapping = {"import": [{"node": "./node.mjs"}, {"default": ["./a.mjs", "./b.mjs"]}]}
        assert resolve_mapping(mapping, IMPORT_DEV).paths == ("./a.mjs", "./b.mjs")

    def test_read_only_mapping(self) -> None:
        mapping = MappingProxyType({"import": "./a.mjs", "default": "./a.cjs"})
        assert resolve_mapping(mapping, IMPORT_DEV).paths == ("./a.mjs",)
        assert resolve_mapping(mapping, REQUIRE_DEV).paths == ("./a.cjs",)
