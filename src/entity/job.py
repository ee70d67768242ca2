"""Job-related entities: discovery output, per-file outcomes, run summary."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, List, Optional, Tuple

# Absolute path of a discovered document; identity is the path string
Candidate = str


class JobOutcome(str, Enum):
    SKIPPED = "skipped"  # companion already existed
    SUCCEEDED = "succeeded"  # exit 0, output written
    FAILED = "failed"  # non-zero exit, companion removed
    ERRORED = "errored"  # exception while processing


@dataclass(frozen=True)
class DiscoveryResult:
    candidates: Tuple[Candidate, ...]
    elapsed_ms: int

    @property
    def count(self) -> int:
        return len(self.candidates)


@dataclass(frozen=True)
class ExtractionResult:
    """Raw round-trip with the external tool: captured stdout and exit status."""
    output_text: str
    exit_code: int
    elapsed_ms: int = 0
    is_json: bool = False


@dataclass
class JobResult:
    candidate: Candidate
    companion: str
    outcome: JobOutcome
    exit_code: Optional[int] = None
    error: Optional[str] = None
    elapsed_ms: int = 0

    def to_dict(self) -> Dict[str, object]:
        d: Dict[str, object] = {
            "candidate": self.candidate,
            "companion": self.companion,
            "outcome": self.outcome.value,
        }
        if self.exit_code is not None:
            d["exit_code"] = self.exit_code
        if self.error is not None:
            d["error"] = self.error
        return d


@dataclass
class RunSummary:
    """Per-candidate results of one run, in processing order."""
    results: List[JobResult] = field(default_factory=list)

    def add(self, result: JobResult) -> None:
        self.results.append(result)

    def counts(self) -> Dict[JobOutcome, int]:
        totals = {outcome: 0 for outcome in JobOutcome}
        for r in self.results:
            totals[r.outcome] += 1
        return totals

    def by_outcome(self, outcome: JobOutcome) -> List[JobResult]:
        return [r for r in self.results if r.outcome == outcome]
