"""Application export – DownloadRequest and CsvDocument."""
from __future__ import annotations

import hashlib
from dataclasses import dataclass, field

__all__ = [
    "CSV_CONTENT_TYPE",
    "CsvDocument",
    "DEFAULT_DATASET",
    "DEFAULT_FILENAME",
    "DownloadRequest",
]

CSV_CONTENT_TYPE = "text/csv"
DEFAULT_DATASET = "asylum_decisions"
DEFAULT_FILENAME = f"{DEFAULT_DATASET}.csv"


@dataclass(frozen=True)
class DownloadRequest:
    """One "save the dataset locally" action; ``None`` fields defer to the exporter."""

    dataset: str = DEFAULT_DATASET
    filename: str | None = None
    timestamped: bool | None = None
    content_type: str = CSV_CONTENT_TYPE


@dataclass(frozen=True)
class CsvDocument:
    """Decoded dataset as delivered to the saver.

    The content is opaque bytes; no CSV schema is enforced.
    """

    filename: str
    content: bytes
    location: str
    content_type: str = CSV_CONTENT_TYPE
    checksum_sha256: str = field(init=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "checksum_sha256", hashlib.sha256(self.content).hexdigest())

    @property
    def size_bytes(self) -> int:
        return len(self.content)

    def text(self, encoding: str = "utf-8-sig") -> str:
        return self.content.decode(encoding)

    def to_dict(self) -> dict[str, object]:
        """Metadata for the caller; the content itself is left out."""
        return {
            "filename": self.filename,
            "location": self.location,
            "content_type": self.content_type,
            "size_bytes": self.size_bytes,
            "checksum_sha256": self.checksum_sha256,
        }
