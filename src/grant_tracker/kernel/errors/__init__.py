"""Kernel error hierarchy – public re-export surface.

Hierarchy::

    BaseError
    ├── DomainError              (domain.py)
    │   └── DecodeError
    ├── ApplicationError         (application.py)
    │   └── TimeoutError
    └── InfrastructureError      (infrastructure.py)
        ├── SourceUnavailableError
        └── SaveFailedError
"""

from grant_tracker.kernel.errors.application import ApplicationError, TimeoutError
from grant_tracker.kernel.errors.base import BaseError
from grant_tracker.kernel.errors.domain import DecodeError, DecodeFailure, DomainError
from grant_tracker.kernel.errors.infrastructure import (
    InfrastructureError,
    SaveFailedError,
    SourceUnavailableError,
)

__all__ = [
    "ApplicationError",
    "BaseError",
    "DecodeError",
    "DecodeFailure",
    "DomainError",
    "InfrastructureError",
    "SaveFailedError",
    "SourceUnavailableError",
    "TimeoutError",
]
