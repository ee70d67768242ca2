"""Map a document path to its companion (sidecar) output path."""

import os
import re

from commons.config import config, section
from commons.constants import Constants as Co

DEFAULT_COMPANION_EXTENSION = ".json"

# Last extension component of a base name: a dot followed by non-dot characters
_LAST_EXTENSION = re.compile(r"\.[^.]+$")


def _companion_extension_from_config() -> str:
    return section(config, Co.OUTPUT).get(Co.EXTENSION) or DEFAULT_COMPANION_EXTENSION


def companion_path(document_path: str, extension: str | None = None) -> str:
    """
    e.g. /data/a/report.pdf -> /data/a/report.json.
    Same directory, base name without its last extension, plus the companion extension.
    Pure string manipulation; never touches the filesystem.
    """
    ext = extension if extension is not None else _companion_extension_from_config()
    directory, base = os.path.split(document_path)
    stem = _LAST_EXTENSION.sub("", base)
    return os.path.join(directory, f"{stem}{ext}")
