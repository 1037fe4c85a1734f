"""Resilience – TimeoutPolicy."""
from __future__ import annotations

import asyncio
import dataclasses
from typing import Awaitable, Callable, TypeVar

from grant_tracker.kernel.errors import TimeoutError as AppTimeoutError

T = TypeVar("T")


@dataclasses.dataclass(frozen=True)
class TimeoutPolicy:
    """Bound an awaitable by a wall-clock limit; ``None`` disables the limit."""
    timeout_seconds: float | None

    def __post_init__(self) -> None:
        if self.timeout_seconds is not None and self.timeout_seconds <= 0:
            raise ValueError("timeout_seconds must be positive or None")

    async def execute(self, func: Callable[[], Awaitable[T]]) -> T:
        if self.timeout_seconds is None:
            return await func()
        try:
            return await asyncio.wait_for(func(), timeout=self.timeout_seconds)
        except TimeoutError as exc:
            raise AppTimeoutError(
                f"Operation timed out after {self.timeout_seconds}s",
                detail={"timeout_seconds": self.timeout_seconds},
            ) from exc


__all__ = ["TimeoutPolicy"]
