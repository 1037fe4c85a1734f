"""Application export – FileSaver port and an in-memory fake."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol, runtime_checkable

__all__ = ["FileSaver", "InMemoryFileSaver", "SavedFile"]


@runtime_checkable
class FileSaver(Protocol):
    """Port: the host's "save content as a local file" primitive."""

    async def save(self, content: bytes, filename: str, content_type: str) -> str:
        """Persist *content* under *filename*; return where it ended up."""
        ...


@dataclass(frozen=True)
class SavedFile:
    filename: str
    content: bytes
    content_type: str


class InMemoryFileSaver:
    """Fake FileSaver for unit tests; keeps every file it was asked to save."""

    def __init__(self) -> None:
        self.saved: list[SavedFile] = []

    async def save(self, content: bytes, filename: str, content_type: str) -> str:
        self.saved.append(SavedFile(filename, content, content_type))
        return f"memory://{filename}"

    @property
    def last(self) -> SavedFile | None:
        return self.saved[-1] if self.saved else None
