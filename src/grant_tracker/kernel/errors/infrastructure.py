"""Infrastructure errors – dataset retrieval and local save failures."""

from __future__ import annotations

from typing import Any

from grant_tracker.kernel.errors.base import BaseError


class InfrastructureError(BaseError):
    """Infrastructure / I/O failure that is not a data-format violation."""

    default_code = "infrastructure_error"
    category = "infrastructure"


class SourceUnavailableError(InfrastructureError):
    """The encoded dataset could not be retrieved (network, missing resource, …)."""

    default_code = "source_unavailable"
    retryable = True

    def __init__(
        self,
        source: str,
        message: str | None = None,
        *,
        status_code: int | None = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(message or f"Dataset source '{source}' is unavailable", **kwargs)
        self.source = source
        self.status_code = status_code
        self.detail.setdefault("source", source)
        if status_code is not None:
            self.detail.setdefault("status_code", status_code)


class SaveFailedError(InfrastructureError):
    """The host environment refused or failed to save the file locally."""

    default_code = "save_failed"

    def __init__(
        self,
        filename: str,
        message: str | None = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(message or f"Could not save '{filename}'", **kwargs)
        self.filename = filename
        self.detail.setdefault("filename", filename)


__all__ = ["InfrastructureError", "SaveFailedError", "SourceUnavailableError"]
