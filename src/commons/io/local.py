"""Local filesystem implementation of FileReader and FileWriter."""

import os


class LocalFileReader:
    """Read from local filesystem."""

    def read_text(self, path: str) -> str | None:
        try:
            with open(path, "r", encoding="utf-8") as f:
                return f.read()
        except FileNotFoundError:
            return None


class LocalFileWriter:
    """Write to local filesystem."""

    def write_text(self, text: str, path: str) -> int:
        """
        Write text verbatim as UTF-8, replacing any existing file.
        newline="" keeps line endings exactly as given. Returns bytes written.
        """
        self.ensure_dir(path)
        data = text.encode("utf-8")
        with open(path, "w", encoding="utf-8", newline="") as f:
            f.write(text)
        return len(data)

    def remove(self, path: str) -> bool:
        """Delete path. Returns False if it did not exist; other OSErrors propagate."""
        try:
            os.remove(path)
        except FileNotFoundError:
            return False
        return True

    def ensure_dir(self, path: str) -> None:
        dirpath = os.path.dirname(path)
        if dirpath:
            os.makedirs(dirpath, exist_ok=True)
