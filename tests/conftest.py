"""Shared test fixtures for strapi-webhook-proxy tests."""

from __future__ import annotations

from pathlib import Path

import pytest

from tests.helpers import DEFAULT_INDEX_TS, write_package_json


@pytest.fixture
def index_ts() -> str:
    """The ``src/index.ts`` generated by ``create-strapi-app``."""
    return DEFAULT_INDEX_TS


@pytest.fixture
def strapi_project(tmp_path: Path, index_ts: str) -> Path:
    """A minimal Strapi project: package.json with @strapi/strapi and src/index.ts."""
    root = tmp_path / "project"
    (root / "src").mkdir(parents=True)
    write_package_json(root, {"name": "test-strapi-project", "dependencies": {"@strapi/strapi": "^5.0.0"}})
    (root / "src" / "index.ts").write_text(index_ts, encoding="utf-8")
    return root
