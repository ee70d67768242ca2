"""Pytest fixtures and configuration. Run from project root with: PYTHONPATH=src pytest tests/ -v"""

import os
import sys
from pathlib import Path

import pytest

# Ensure src is on path so imports like commons.*, entity.* work
PROJECT_ROOT = Path(__file__).resolve().parent.parent
SRC = PROJECT_ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

# Optional: set working directory so relative paths in config resolve
os.chdir(PROJECT_ROOT)

from entity.job import ExtractionResult  # noqa: E402


class FakeAdapter:
    """Adapter stand-in: returns canned results per candidate and records calls."""

    def __init__(self, results=None, default=None, errors=None):
        self.results = results or {}
        self.default = default or ExtractionResult(output_text="[]", exit_code=0, is_json=True)
        self.errors = errors or {}
        self.calls = []

    def extract(self, candidate):
        self.calls.append(candidate)
        if candidate in self.errors:
            raise self.errors[candidate]
        return self.results.get(candidate, self.default)


@pytest.fixture
def fake_adapter():
    return FakeAdapter()


@pytest.fixture
def make_tree(tmp_path):
    """Create files under tmp_path from relative paths; returns tmp_path."""

    def _make(*rel_paths, content=b"%PDF-1.4 fake"):
        for rel in rel_paths:
            p = tmp_path / rel
            p.parent.mkdir(parents=True, exist_ok=True)
            p.write_bytes(content)
        return tmp_path

    return _make
