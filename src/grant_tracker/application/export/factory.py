"""Application export – wiring from settings and the ``download_csv`` entry point."""
from __future__ import annotations

from grant_tracker.adapters.filesystem import BundledResourceSource, LocalFileSaver
from grant_tracker.adapters.http import HttpDatasetSource
from grant_tracker.application.export.exporter import DatasetExporter
from grant_tracker.application.export.request import CsvDocument, DownloadRequest
from grant_tracker.application.export.saver import FileSaver
from grant_tracker.application.export.source import DatasetSource
from grant_tracker.config.settings import DotenvSettingsLoader, ExporterSettings
from grant_tracker.config.validation import ConfigError
from grant_tracker.kernel.encoding import Radix64Decoder
from grant_tracker.kernel.errors import BaseError
from grant_tracker.kernel.time import Clock
from grant_tracker.kernel.types import Err, Result
from grant_tracker.observability.logging import JsonLoggerFactory

__all__ = ["build_exporter", "download_csv"]


def build_exporter(
    settings: ExporterSettings | None = None,
    *,
    saver: FileSaver | None = None,
    clock: Clock | None = None,
    configure_logging: bool = False,
) -> DatasetExporter:
    """Assemble a :class:`DatasetExporter` from ``GRANT_TRACKER_*`` settings.

    Settings are read from the environment (and a ``.env`` file) when not
    given. Raises :class:`ConfigError` subclasses for bad configuration.
    """
    if settings is None:
        settings = DotenvSettingsLoader().load(ExporterSettings)
    settings.require_source()
    if configure_logging:
        JsonLoggerFactory.configure(settings.log_level)

    source: DatasetSource
    if settings.source_url:
        source = HttpDatasetSource(settings.source_url, payload_key=settings.payload_key)
    else:
        source = BundledResourceSource(settings.source_path)

    return DatasetExporter(
        source,
        saver or LocalFileSaver(settings.output_dir),
        decoder=Radix64Decoder(settings.alphabet),
        clock=clock,
        filename=settings.filename,
        timestamped=settings.timestamped,
        fetch_timeout=settings.timeout_seconds,
    )


async def download_csv(
    exporter: DatasetExporter | None = None,
    request: DownloadRequest | None = None,
) -> Result[CsvDocument, BaseError]:
    """Save the configured dataset as a CSV file and report the outcome.

    Never raises the library's typed errors: configuration, retrieval,
    decoding and save failures all come back as ``Err``.
    """
    if exporter is None:
        try:
            exporter = build_exporter()
        except ConfigError as exc:
            return Err(exc)
    return await exporter.download_csv(request)
