"""Protocols for extraction adapters. Implement these to drive a different extraction backend."""

from typing import Protocol

from entity.job import Candidate, ExtractionResult


class ExtractionAdapter(Protocol):
    """One round-trip with an extraction backend for a single document."""

    def extract(self, candidate: Candidate) -> ExtractionResult:
        """
        Return the backend's raw output text and exit status.
        A non-zero exit_code means the extraction failed; no retry is attempted here.
        """
        ...
