"""
audit-sidecar: write a JSON findings sidecar next to every PDF audit report.

Walks a directory tree, and for each report without a companion .json runs the
configured extraction CLI once (prompt on stdin, findings on stdout). Per-file
failures are logged and never stop the batch; the exit status is 0 unless the
root itself cannot be read.

Usage:
    python -m app.cli
    python -m app.cli /path/to/reports --verbose
    python -m app.cli --command "npx @polka-codes/cli --silent"
    VERBOSE=1 python scripts/run_app.py
"""

import argparse
import logging
import os
import sys
from dataclasses import dataclass, field
from typing import List, Optional

from commons.config import config, section
from commons.constants import Constants as Co
from commons.folder.discovery import DEFAULT_DOCUMENT_EXTENSION, LocalFileDiscoverer
from commons.log import setup_logging, verbose_from_env
from entity.job import RunSummary

from app.extractors import get_adapter
from app.extractors.subprocess_adapter import DEFAULT_COMMAND
from app.jobs import CompanionGate, ExtractionJobRunner
from app.orchestrator import Orchestrator

logger = logging.getLogger(__name__)


def _extractor_cfg(key: str, default=None):
    return section(config, Co.EXTRACTOR).get(key, default)


def _default_command():
    return os.getenv(Co.COMMAND_ENV) or _extractor_cfg(Co.COMMAND) or DEFAULT_COMMAND


@dataclass
class AppConfig:
    """Run configuration: config.yaml defaults, env overrides, then CLI flags."""
    root: str = field(default_factory=os.getcwd)
    verbose: bool = field(default_factory=verbose_from_env)
    document_extension: str = field(
        default_factory=lambda: section(config, Co.DISCOVERY).get(Co.EXTENSION) or DEFAULT_DOCUMENT_EXTENSION
    )
    exclude_dirs: Optional[List[str]] = field(default_factory=lambda: section(config, Co.DISCOVERY).get(Co.EXCLUDE_DIRS))
    companion_extension: Optional[str] = field(default_factory=lambda: section(config, Co.OUTPUT).get(Co.EXTENSION))
    adapter_kind: str = field(default_factory=lambda: _extractor_cfg(Co.KIND, "subprocess"))
    command: str = field(default_factory=_default_command)


def build_orchestrator(app_config: AppConfig) -> Orchestrator:
    adapter = get_adapter(app_config.adapter_kind, command=app_config.command)
    if adapter is None:
        raise ValueError(f"Unknown extractor kind: {app_config.adapter_kind}")
    gate = CompanionGate(extension=app_config.companion_extension)
    discoverer = LocalFileDiscoverer(
        extension=app_config.document_extension,
        exclude_dirs=tuple(app_config.exclude_dirs) if app_config.exclude_dirs is not None else None,
    )
    return Orchestrator(discoverer, ExtractionJobRunner(adapter, gate=gate), gate=gate)


def run(app_config: AppConfig) -> RunSummary:
    return build_orchestrator(app_config).run(app_config.root)


def parse_args(argv=None) -> AppConfig:
    defaults = AppConfig()
    parser = argparse.ArgumentParser(
        description="Extract audit findings from PDF reports into JSON sidecar files",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Process every PDF under the current directory
  python -m app.cli

  # Process a specific tree with per-directory progress
  python -m app.cli /data/audits --verbose

  # Use a different extraction tool
  python -m app.cli --command "my-extractor --quiet"
        """,
    )
    parser.add_argument(
        "root",
        nargs="?",
        default=defaults.root,
        help="Directory to scan recursively (default: current directory)",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        default=defaults.verbose,
        help="Log every directory, candidate and subprocess step (also VERBOSE=1)",
    )
    parser.add_argument(
        "--command",
        default=defaults.command,
        help="Extraction command run once per document (default: extractor.command from config, or EXTRACTOR_COMMAND)",
    )
    parser.add_argument(
        "--extension",
        default=defaults.document_extension,
        help="Document extension to look for, case-insensitive (default: discovery.extension from config)",
    )
    args = parser.parse_args(argv)
    if not args.extension.strip():
        parser.error("--extension must not be empty")

    defaults.root = args.root
    defaults.verbose = args.verbose
    defaults.command = args.command
    defaults.document_extension = args.extension
    return defaults


def main(argv=None) -> int:
    app_config = parse_args(argv)
    setup_logging(verbose=app_config.verbose)
    try:
        run(app_config)
    except (ValueError, OSError) as e:
        logger.error("cannot process %s: %s", app_config.root, e)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
