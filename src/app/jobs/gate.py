"""Skip documents whose companion output already exists."""

import os

from commons.folder.paths import companion_path
from entity.job import Candidate


class CompanionGate:
    """
    Existence probe on the companion path. os.path.exists reports False for any
    access error, so an unreadable companion counts as absent and gets rebuilt.
    Not atomic against concurrent changes to the companion; runs are single-instance.
    """

    def __init__(self, extension: str | None = None):
        self.extension = extension

    def companion(self, candidate: Candidate) -> str:
        return companion_path(candidate, self.extension)

    def exists(self, candidate: Candidate) -> bool:
        return os.path.exists(self.companion(candidate))
