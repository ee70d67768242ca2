"""Protocols for file I/O. Implement these to add SharePoint, S3, etc."""

from typing import Protocol


class FileReader(Protocol):
    """Read text from a source (local path, URL, etc.)."""

    def read_text(self, path: str) -> str | None:
        ...


class FileWriter(Protocol):
    """Write or remove text files at a destination."""

    def write_text(self, text: str, path: str) -> int:
        ...

    def remove(self, path: str) -> bool:
        ...

    def ensure_dir(self, path: str) -> None:
        ...
