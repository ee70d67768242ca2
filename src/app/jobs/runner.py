"""Run one extraction job: call the adapter, then write the companion or clean it up."""

from __future__ import annotations

import logging

from commons.io.base import FileWriter
from commons.io.local import LocalFileWriter
from entity.job import Candidate, JobOutcome, JobResult

from app.extractors.base import ExtractionAdapter
from app.jobs.gate import CompanionGate

logger = logging.getLogger(__name__)


class ExtractionJobRunner:
    """
    exit 0   -> write the captured output verbatim to the companion (SUCCEEDED)
    exit != 0 -> remove any companion left by an earlier interrupted run (FAILED)
    Exceptions (spawn or I/O failures) propagate; the orchestrator records them as ERRORED.
    """

    def __init__(
        self,
        adapter: ExtractionAdapter,
        writer: FileWriter | None = None,
        gate: CompanionGate | None = None,
    ):
        self.adapter = adapter
        self.writer = writer or LocalFileWriter()
        self.gate = gate or CompanionGate()

    def run(self, candidate: Candidate) -> JobResult:
        out_path = self.gate.companion(candidate)
        result = self.adapter.extract(candidate)

        if result.exit_code == 0:
            written = self.writer.write_text(result.output_text, out_path)
            logger.info("wrote JSON: %s bytes: %d", out_path, written)
            outcome = JobOutcome.SUCCEEDED
        else:
            logger.error("extractor failed for: %s (exit code %d)", candidate, result.exit_code)
            self._remove_incomplete(out_path)
            outcome = JobOutcome.FAILED

        return JobResult(
            candidate=candidate,
            companion=out_path,
            outcome=outcome,
            exit_code=result.exit_code,
            elapsed_ms=result.elapsed_ms,
        )

    def _remove_incomplete(self, out_path: str) -> None:
        try:
            if self.writer.remove(out_path):
                logger.debug("removed incomplete file: %s", out_path)
        except OSError as e:
            logger.debug("could not remove %s: %s", out_path, e)
