"""Per-document jobs: idempotency gate and job runner."""

from app.jobs.gate import CompanionGate
from app.jobs.runner import ExtractionJobRunner

__all__ = ["CompanionGate", "ExtractionJobRunner"]
