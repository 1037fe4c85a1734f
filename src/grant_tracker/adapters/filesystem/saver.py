"""Filesystem adapter – LocalFileSaver."""
from __future__ import annotations

import asyncio
import os
import tempfile
from pathlib import Path

from grant_tracker.kernel.errors import SaveFailedError

_MAX_SUFFIX = 1000


class LocalFileSaver:
    """Saves downloads into a local directory.

    Existing files are left alone: a second ``report.csv`` lands as
    ``report_1.csv`` unless *overwrite* is set, in which case the file is
    replaced atomically.
    """

    def __init__(self, directory: str | os.PathLike[str], *, overwrite: bool = False) -> None:
        self.directory = Path(directory)
        self.overwrite = overwrite

    async def save(self, content: bytes, filename: str, content_type: str) -> str:  # noqa: ARG002
        if not filename or Path(filename).name != filename:
            raise SaveFailedError(filename, f"Refusing to save outside the download directory: {filename!r}")
        return await asyncio.to_thread(self._write, content, filename)

    def _write(self, content: bytes, filename: str) -> str:
        try:
            self.directory.mkdir(parents=True, exist_ok=True)
            if self.overwrite:
                return str(self._replace(content, self.directory / filename))
            return str(self._create_new(content, filename))
        except SaveFailedError:
            raise
        except OSError as exc:
            raise SaveFailedError(filename, f"Could not save '{filename}': {exc}", cause=exc) from exc

    def _replace(self, content: bytes, target: Path) -> Path:
        fd, tmp_name = tempfile.mkstemp(dir=self.directory, prefix=f".{target.name}.", suffix=".part")
        try:
            with os.fdopen(fd, "wb") as fh:
                fh.write(content)
            os.replace(tmp_name, target)
        except BaseException:
            Path(tmp_name).unlink(missing_ok=True)
            raise
        return target

    def _create_new(self, content: bytes, filename: str) -> Path:
        stem, suffix = Path(filename).stem, Path(filename).suffix
        for n in range(_MAX_SUFFIX):
            candidate = self.directory / (filename if n == 0 else f"{stem}_{n}{suffix}")
            try:
                fh = candidate.open("xb")
            except FileExistsError:
                continue
            try:
                with fh:
                    fh.write(content)
            except BaseException:
                candidate.unlink(missing_ok=True)
                raise
            return candidate
        raise SaveFailedError(filename, f"No free file name for '{filename}' in {self.directory}")


__all__ = ["LocalFileSaver"]
