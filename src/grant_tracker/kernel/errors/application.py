"""Application-layer errors – cross-cutting concerns at use-case level."""

from __future__ import annotations

from grant_tracker.kernel.errors.base import BaseError


class ApplicationError(BaseError):
    """Cross-cutting application-layer concern."""

    default_code = "application_error"
    category = "application"


class TimeoutError(ApplicationError):  # noqa: A001
    """Operation timed out."""

    default_code = "timeout"
    retryable = True


__all__ = ["ApplicationError", "TimeoutError"]
