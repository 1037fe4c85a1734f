"""Observability – structured logging helpers."""
from grant_tracker.observability.logging.factory import JsonLoggerFactory
from grant_tracker.observability.logging.processors import get_logger

__all__ = ["JsonLoggerFactory", "get_logger"]
