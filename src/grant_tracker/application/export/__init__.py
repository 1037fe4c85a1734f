"""Application export – encoded dataset to downloadable CSV."""
from grant_tracker.application.export.request import (
    CSV_CONTENT_TYPE,
    DEFAULT_DATASET,
    DEFAULT_FILENAME,
    CsvDocument,
    DownloadRequest,
)
from grant_tracker.application.export.source import DatasetSource, StaticDatasetSource
from grant_tracker.application.export.saver import FileSaver, InMemoryFileSaver, SavedFile
from grant_tracker.application.export.exporter import DatasetExporter
from grant_tracker.application.export.factory import build_exporter, download_csv

__all__ = [
    "CSV_CONTENT_TYPE",
    "CsvDocument",
    "DEFAULT_DATASET",
    "DEFAULT_FILENAME",
    "DatasetExporter",
    "DatasetSource",
    "DownloadRequest",
    "FileSaver",
    "InMemoryFileSaver",
    "SavedFile",
    "StaticDatasetSource",
    "build_exporter",
    "download_csv",
]
