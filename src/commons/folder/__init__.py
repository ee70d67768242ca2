"""Document discovery and companion path mapping. Extend by adding new discoverers."""

from commons.folder.discovery import FileDiscoverer, LocalFileDiscoverer
from commons.folder.paths import companion_path

__all__ = [
    "FileDiscoverer",
    "LocalFileDiscoverer",
    "companion_path",
]
