"""Application export – DatasetExporter: fetch, decode and save a CSV dataset."""
from __future__ import annotations

from datetime import UTC, datetime
from pathlib import PurePath

from grant_tracker.application.export.request import (
    DEFAULT_FILENAME,
    CsvDocument,
    DownloadRequest,
)
from grant_tracker.application.export.saver import FileSaver
from grant_tracker.application.export.source import DatasetSource, source_name
from grant_tracker.kernel.encoding import Radix64Decoder
from grant_tracker.kernel.errors import BaseError, SaveFailedError, SourceUnavailableError
from grant_tracker.kernel.errors import TimeoutError as AppTimeoutError
from grant_tracker.kernel.time import Clock, SystemClock
from grant_tracker.kernel.types import Err, Ok, Result
from grant_tracker.observability.logging import get_logger
from grant_tracker.resilience.timeouts import TimeoutPolicy

__all__ = ["DatasetExporter"]

_log = get_logger(__name__)


def _as_utc(moment: datetime) -> datetime:
    """Naive datetimes are taken to be UTC already."""
    if moment.tzinfo is None:
        return moment.replace(tzinfo=UTC)
    return moment.astimezone(UTC)


class DatasetExporter:
    """Turns an encoded dataset into a locally saved CSV file.

    Each call fetches, decodes and saves on its own; nothing is cached or
    shared between calls, and the saver is only reached once decoding has
    succeeded.
    """

    def __init__(
        self,
        source: DatasetSource,
        saver: FileSaver,
        *,
        decoder: Radix64Decoder | None = None,
        clock: Clock | None = None,
        filename: str = DEFAULT_FILENAME,
        timestamped: bool = False,
        fetch_timeout: float | None = None,
    ) -> None:
        self._source = source
        self._saver = saver
        self._decoder = decoder or Radix64Decoder()
        self._clock = clock or SystemClock()
        self._filename = filename
        self._timestamped = timestamped
        self._fetch_policy = TimeoutPolicy(fetch_timeout)

    async def export(self, request: DownloadRequest | None = None) -> CsvDocument:
        """Run the pipeline, raising the typed error of the step that failed."""
        request = request or DownloadRequest()
        log = _log.bind(dataset=request.dataset, source=source_name(self._source))
        filename = self.filename_for(request)
        try:
            log.debug("dataset_fetch_started")
            payload = await self._fetch()
            content = self._decoder.decode(payload)
            log.info("dataset_decoded", size_bytes=len(content))
            location = await self._save(content, filename, request.content_type)
        except BaseError as exc:
            log.warning("dataset_export_failed", code=exc.code, error=exc.message)
            raise
        log.info("dataset_saved", filename=filename, location=location)
        return CsvDocument(
            filename=filename,
            content=content,
            location=location,
            content_type=request.content_type,
        )

    async def download_csv(self, request: DownloadRequest | None = None) -> Result[CsvDocument, BaseError]:
        """``Ok(document)`` on success, ``Err(error)`` with the original error otherwise."""
        try:
            return Ok(await self.export(request))
        except BaseError as exc:
            return Err(exc)

    def filename_for(self, request: DownloadRequest) -> str:
        name = PurePath(request.filename or self._filename)
        suffix = name.suffix or ".csv"
        timestamped = self._timestamped if request.timestamped is None else request.timestamped
        if not timestamped:
            return f"{name.stem}{suffix}"
        stamp = _as_utc(self._clock.now()).strftime("%Y%m%dT%H%M%SZ")
        return f"{name.stem}_{stamp}{suffix}"

    async def _fetch(self) -> str:
        try:
            return await self._fetch_policy.execute(self._source.fetch)
        except AppTimeoutError as exc:
            raise SourceUnavailableError(
                source_name(self._source),
                f"Timed out fetching dataset from '{source_name(self._source)}'",
                cause=exc,
            ) from exc
        except BaseError:
            raise
        except Exception as exc:  # noqa: BLE001
            name = source_name(self._source)
            raise SourceUnavailableError(
                name, f"Could not fetch dataset from '{name}': {exc!r}", cause=exc
            ) from exc

    async def _save(self, content: bytes, filename: str, content_type: str) -> str:
        try:
            return await self._saver.save(content, filename, content_type)
        except SaveFailedError:
            raise
        except Exception as exc:  # noqa: BLE001
            raise SaveFailedError(filename, f"Could not save '{filename}': {exc}", cause=exc) from exc
