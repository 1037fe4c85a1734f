"""Kernel types."""
from grant_tracker.kernel.types.result import Err, Ok, Result

__all__ = ["Err", "Ok", "Result"]
