"""
Extendible app package: extraction adapters, per-document jobs, orchestration.

Subpackages:
  extractors  - ExtractionAdapter; register new backends via register_adapter
  jobs        - CompanionGate (skip already-processed documents), ExtractionJobRunner
  orchestrator - Orchestrator (discovery -> gate -> job, one document at a time)
"""

from app.extractors import (
    SubprocessExtractionAdapter,
    get_adapter,
    register_adapter,
    ADAPTER_REGISTRY,
)
from app.jobs import CompanionGate, ExtractionJobRunner
from app.orchestrator import Orchestrator

__all__ = [
    "SubprocessExtractionAdapter",
    "CompanionGate",
    "ExtractionJobRunner",
    "Orchestrator",
    "get_adapter",
    "register_adapter",
    "ADAPTER_REGISTRY",
]
