"""Shared fixtures for line-snipe tests."""

import sys
from pathlib import Path

# Add project root to path
_project_root = Path(__file__).parent.parent
if str(_project_root) not in sys.path:
    sys.path.insert(0, str(_project_root))

import pytest

from line_snipe.models import SearchConfig


@pytest.fixture
def write_tree(tmp_path):
    """Create files under tmp_path from {relative_path: str | bytes}."""

    def _write(files: dict) -> Path:
        for rel, content in files.items():
            path = tmp_path / rel
            path.parent.mkdir(parents=True, exist_ok=True)
            if isinstance(content, bytes):
                path.write_bytes(content)
            else:
                path.write_text(content, encoding="utf-8")
        return tmp_path

    return _write


@pytest.fixture
def make_config():
    """SearchConfig.build with a default pattern."""

    def _make(pattern: str = "needle", **kwargs) -> SearchConfig:
        return SearchConfig.build(pattern, **kwargs)

    return _make
