"""Discover documents once, then run one job per document, strictly in order."""

from __future__ import annotations

import logging

from commons.folder.discovery import FileDiscoverer
from entity.job import Candidate, JobOutcome, JobResult, RunSummary

from app.jobs.gate import CompanionGate
from app.jobs.runner import ExtractionJobRunner

logger = logging.getLogger(__name__)


class Orchestrator:
    """
    Best effort over many files: every candidate gets a JobResult, a failure or an
    exception on one never stops the ones after it, and nothing is escalated.
    """

    def __init__(
        self,
        discoverer: FileDiscoverer,
        runner: ExtractionJobRunner,
        gate: CompanionGate | None = None,
    ):
        self.discoverer = discoverer
        self.runner = runner
        self.gate = gate or runner.gate

    def run(self, root: str) -> RunSummary:
        discovery = self.discoverer.discover(root)
        summary = RunSummary()

        if discovery.count == 0:
            logger.warning("No documents found under %s (recursive).", root)
            return summary

        logger.info("processing %d document(s)...", discovery.count)
        for i, candidate in enumerate(discovery.candidates, start=1):
            logger.info("file %d/%d: %s", i, discovery.count, candidate)
            summary.add(self._process(candidate))

        self._log_summary(summary)
        logger.info("done.")
        return summary

    def _process(self, candidate: Candidate) -> JobResult:
        out_path = self.gate.companion(candidate)
        if self.gate.exists(candidate):
            logger.info("skip existing JSON: %s", out_path)
            return JobResult(candidate=candidate, companion=out_path, outcome=JobOutcome.SKIPPED)

        try:
            result = self.runner.run(candidate)
        except Exception as e:
            logger.exception("unhandled error for: %s", candidate)
            return JobResult(
                candidate=candidate,
                companion=out_path,
                outcome=JobOutcome.ERRORED,
                error=f"{type(e).__name__}: {e}",
            )

        if result.outcome == JobOutcome.FAILED:
            logger.warning("continuing after failure for: %s", candidate)
        return result

    @staticmethod
    def _log_summary(summary: RunSummary) -> None:
        counts = summary.counts()
        logger.info(
            "summary: %s",
            ", ".join(f"{outcome.value}={counts[outcome]}" for outcome in JobOutcome),
        )
        for result in summary.by_outcome(JobOutcome.FAILED) + summary.by_outcome(JobOutcome.ERRORED):
            logger.debug("  %s", result.to_dict())
