"""Tests for app.extractors._paths and commons.folder.paths."""

import os

import pytest

from app.extractors._paths import PROJECT_ROOT, project_path, resolve_project_relative
from commons.folder.paths import companion_path


def test_project_path_joins_parts():
    p = project_path("src", "config", "config.yaml")
    assert p == str(PROJECT_ROOT.joinpath("src", "config", "config.yaml"))


def test_project_root_is_directory():
    assert os.path.isdir(PROJECT_ROOT), "PROJECT_ROOT should be the repo root directory"


def test_resolve_project_relative():
    assert resolve_project_relative("src/prompt/x.txt") == project_path("src", "prompt", "x.txt")
    absolute = os.path.abspath("/tmp/prompt.txt")
    assert resolve_project_relative(absolute) == absolute


@pytest.mark.parametrize(
    "document, expected",
    [
        ("report.pdf", "report.json"),
        ("REPORT.PDF", "REPORT.json"),
        ("audit.v2.pdf", "audit.v2.json"),
        ("no_extension", "no_extension.json"),
    ],
)
def test_companion_path_replaces_last_extension(document, expected):
    directory = os.path.join("data", "a")
    assert companion_path(os.path.join(directory, document)) == os.path.join(directory, expected)


def test_companion_path_keeps_directory(tmp_path):
    doc = tmp_path / "sub dir" / "r.pdf"
    assert companion_path(str(doc)) == str(tmp_path / "sub dir" / "r.json")


def test_companion_path_custom_extension():
    assert companion_path(os.path.join("x", "r.pdf"), ".findings.json") == os.path.join("x", "r.findings.json")


def test_companion_path_is_deterministic_and_idempotent():
    doc = os.path.join("reports", "q3.pdf")
    first = companion_path(doc)
    assert companion_path(doc) == first
    # mapping a companion again yields the same path
    assert companion_path(first) == first


def test_companion_path_does_not_touch_filesystem():
    assert companion_path("/definitely/not/here.pdf").endswith("here.json")
