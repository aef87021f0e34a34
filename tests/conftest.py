"""Shared test fixtures for the resolver test suite."""

from __future__ import annotations

from pathlib import Path
from typing import Any

import pytest

from pkgexports.config import Config
from pkgexports.resolver import ExportsResolver


# === Fixtures ===


@pytest.fixture
def resolver() -> ExportsResolver:
    """A resolver with a private pattern cache and default options."""
    return ExportsResolver()


@pytest.fixture
def strict_resolver() -> ExportsResolver:
    """A resolver that raises instead of returning empty results."""
    return ExportsResolver(options={"assert_match": True})


@pytest.fixture
def glob_pkg() -> dict[str, Any]:
    """A package whose exports use several competing wildcard patterns."""
    return {
        "name": "glob",
        "exports": {
            "./*": "./*.js",
            "./*.*": "./*/index.*",
            "./*.css": "./*/*.css",
            "./*.ts": "./*/index.ts",
        },
    }


@pytest.fixture
def config_yaml(tmp_path: Path) -> str:
    """Write a sample config YAML file and return its path."""
    content = """
cache:
  max_entries: 8
resolve:
  conditions: [node, worker]
  is_production: true
  is_require: true
  assert_match: false
"""
    yaml_file = tmp_path / "pkgexports.yaml"
    yaml_file.write_text(content)
    return str(yaml_file)


@pytest.fixture
def config(config_yaml: str) -> Config:
    """Config loaded from the sample YAML file."""
    return Config.load(config_yaml)
