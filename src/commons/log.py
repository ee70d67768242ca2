"""Logging setup: timestamped lines, info to stdout, warnings and errors to stderr."""

import logging
import os
import sys

from commons.config import config, section
from commons.constants import Constants as Co

DEFAULT_FORMAT = "[%(asctime)s] %(levelname)s %(message)s"
DEFAULT_DATEFMT = "%Y-%m-%dT%H:%M:%S"


class _BelowWarning(logging.Filter):
    def filter(self, record: logging.LogRecord) -> bool:
        return record.levelno < logging.WARNING


def verbose_from_env() -> bool:
    """VERBOSE=1 (env or .env) turns on verbose mode without the CLI flag."""
    return os.getenv(Co.VERBOSE_ENV, "").strip() == "1"


def setup_logging(verbose: bool = False) -> None:
    """Configure the root logger once per process. Verbose switches to DEBUG."""
    log_cfg = section(config, Co.LOGGING)
    formatter = logging.Formatter(
        log_cfg.get(Co.FORMAT, DEFAULT_FORMAT),
        datefmt=log_cfg.get(Co.DATEFMT, DEFAULT_DATEFMT),
    )

    out_handler = logging.StreamHandler(sys.stdout)
    out_handler.addFilter(_BelowWarning())
    out_handler.setFormatter(formatter)

    err_handler = logging.StreamHandler(sys.stderr)
    err_handler.setLevel(logging.WARNING)
    err_handler.setFormatter(formatter)

    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        handlers=[out_handler, err_handler],
        force=True,
    )
