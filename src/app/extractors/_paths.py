"""Shared path resolution for extractors (project root, prompts)."""

import os
from pathlib import Path

# Project root = repo root (parent of src)
_SRC_DIR = Path(__file__).resolve().parent.parent.parent
PROJECT_ROOT = _SRC_DIR.parent

DEFAULT_PROMPT_PARTS = ("src", "prompt", "audit_findings_prompt.txt")


def project_path(*parts: str) -> str:
    return str(PROJECT_ROOT.joinpath(*parts))


def resolve_project_relative(path: str) -> str:
    """Absolute paths are returned unchanged; relative ones are taken from the project root."""
    if os.path.isabs(path):
        return path
    return project_path(*Path(path).parts)
