"""Filesystem adapter – BundledResourceSource."""
from __future__ import annotations

import asyncio
import os
from importlib import resources
from importlib.resources.abc import Traversable
from pathlib import Path

from grant_tracker.kernel.errors import SourceUnavailableError


class BundledResourceSource:
    """Reads the encoded dataset from a file shipped with the application.

    The read runs in a worker thread so the event loop stays responsive.
    """

    def __init__(self, path: str | os.PathLike[str] | Traversable, *, encoding: str = "utf-8") -> None:
        self._path: Path | Traversable = Path(path) if isinstance(path, (str, os.PathLike)) else path
        self._encoding = encoding
        self.name = str(path)

    @classmethod
    def from_package(cls, package: str, resource: str, *, encoding: str = "utf-8") -> "BundledResourceSource":
        """Locate *resource* inside an importable *package* (``importlib.resources``)."""
        return cls(resources.files(package).joinpath(resource), encoding=encoding)

    async def fetch(self) -> str:
        return await asyncio.to_thread(self._read)

    def _read(self) -> str:
        try:
            return self._path.read_text(encoding=self._encoding).strip()
        except (OSError, UnicodeDecodeError) as exc:
            raise SourceUnavailableError(self.name, f"Cannot read bundled dataset '{self.name}': {exc}", cause=exc) from exc


__all__ = ["BundledResourceSource"]
