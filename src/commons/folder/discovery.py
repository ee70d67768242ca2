"""Recursive document discovery. Swap in another FileDiscoverer for remote stores."""

import logging
import os
import time
from typing import List, Protocol

from commons.config import config, section
from commons.constants import Constants as Co
from entity.job import Candidate, DiscoveryResult

logger = logging.getLogger(__name__)

# Fallbacks when config not available
DEFAULT_DOCUMENT_EXTENSION = ".pdf"
DEFAULT_EXCLUDE_DIRS = (".git", "node_modules")


def _discovery_config() -> tuple[str, tuple[str, ...]]:
    disc = section(config, Co.DISCOVERY)
    extension = disc.get(Co.EXTENSION) or DEFAULT_DOCUMENT_EXTENSION
    exclude = disc.get(Co.EXCLUDE_DIRS)
    return extension, tuple(exclude) if exclude is not None else DEFAULT_EXCLUDE_DIRS


class FileDiscoverer(Protocol):
    """Protocol: walk a root and return the ordered candidate documents."""

    def discover(self, root: str) -> DiscoveryResult:
        ...


class LocalFileDiscoverer:
    """
    Depth-first walk of a local directory tree.
    Entries are visited in os.scandir order (no sorting); a subdirectory is walked
    as soon as it is met. Directories named in exclude_dirs are never entered and
    unreadable directories are skipped with a warning. Symlinks are not followed.
    extension/exclude_dirs default from config.yaml discovery section.
    """

    def __init__(
        self,
        extension: str | None = None,
        exclude_dirs: tuple[str, ...] | None = None,
    ):
        cfg_ext, cfg_exclude = _discovery_config()
        # an empty suffix would match every file
        self.extension = (extension or cfg_ext).lower()
        self.exclude_dirs = frozenset(exclude_dirs if exclude_dirs is not None else cfg_exclude)

    def discover(self, root: str) -> DiscoveryResult:
        if not os.path.isdir(root):
            raise ValueError(f"Not a folder: {root}")

        started = time.perf_counter()
        results: List[Candidate] = []
        self._walk(os.path.abspath(root), results)
        elapsed_ms = round((time.perf_counter() - started) * 1000)

        logger.info("discovered %d %s file(s) in %d ms", len(results), self._label(), elapsed_ms)
        for path in results:
            logger.debug("  - %s", path)
        return DiscoveryResult(candidates=tuple(results), elapsed_ms=elapsed_ms)

    def _walk(self, directory: str, results: List[Candidate]) -> None:
        logger.debug("scan dir: %s", directory)
        try:
            with os.scandir(directory) as it:
                entries = list(it)
        except OSError as e:
            logger.warning("skip unreadable dir: %s - %s", directory, e)
            return

        for entry in entries:
            full = os.path.join(directory, entry.name)
            if entry.is_dir(follow_symlinks=False):
                if entry.name in self.exclude_dirs:
                    logger.debug("skip dir: %s", full)
                    continue
                self._walk(full, results)
            elif entry.is_file(follow_symlinks=False) and self._matches(entry.name):
                results.append(full)
                logger.debug("found %s: %s", self._label(), full)

    def _matches(self, name: str) -> bool:
        return name.lower().endswith(self.extension)

    def _label(self) -> str:
        return self.extension.lstrip(".") or "document"
