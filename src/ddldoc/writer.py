"""Document persistence.

The generator hands finished documents to a ``DocumentWriter``. The
default ``FileSystemWriter`` creates the output directory when needed and
overwrites existing files. Errors propagate unchanged; nothing is retried.
"""

from pathlib import Path
from typing import Protocol


class DocumentWriter(Protocol):
    """Protocol for document sinks."""

    def write(self, directory: Path, filename: str, content: str) -> Path:
        """Persist ``content`` and return where it went."""
        ...


class FileSystemWriter:
    """Write documents as UTF-8 files."""

    __slots__ = ()

    def write(self, directory: Path, filename: str, content: str) -> Path:
        directory.mkdir(parents=True, exist_ok=True)
        path = directory / filename
        path.write_text(content, encoding="utf-8")
        return path


class MemoryWriter:
    """Collect documents in a dict keyed by output path.

    Useful for previews and tests.
    """

    __slots__ = ("documents",)

    def __init__(self) -> None:
        self.documents: dict[Path, str] = {}

    def write(self, directory: Path, filename: str, content: str) -> Path:
        path = directory / filename
        self.documents[path] = content
        return path
