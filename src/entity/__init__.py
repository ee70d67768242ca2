"""Shared entities: discovery/job results and the finding schema used for output diagnostics."""

from entity.job import (
    Candidate,
    DiscoveryResult,
    ExtractionResult,
    JobOutcome,
    JobResult,
    RunSummary,
)
from entity.finding_schema import Finding, FindingList

__all__ = [
    "Candidate",
    "DiscoveryResult",
    "ExtractionResult",
    "JobOutcome",
    "JobResult",
    "RunSummary",
    "Finding",
    "FindingList",
]
