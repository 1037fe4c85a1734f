"""Application export – DatasetSource port and an in-memory source."""
from __future__ import annotations

from typing import Protocol, runtime_checkable

__all__ = ["DatasetSource", "StaticDatasetSource", "source_name"]


@runtime_checkable
class DatasetSource(Protocol):
    """Port: yields the encoded dataset as text."""

    async def fetch(self) -> str:
        """Return the EncodedPayload; raise ``SourceUnavailableError`` on failure."""
        ...


class StaticDatasetSource:
    """Source backed by a string already in memory (bundled constant, tests)."""

    def __init__(self, payload: str, name: str = "static") -> None:
        self._payload = payload
        self.name = name

    async def fetch(self) -> str:
        return self._payload


def source_name(source: DatasetSource) -> str:
    """Identifier used in logs and ``SourceUnavailableError``."""
    return str(getattr(source, "name", type(source).__name__))
