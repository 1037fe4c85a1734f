"""Filesystem adapter – bundled dataset source and local download directory."""
from grant_tracker.adapters.filesystem.resource import BundledResourceSource
from grant_tracker.adapters.filesystem.saver import LocalFileSaver

__all__ = ["BundledResourceSource", "LocalFileSaver"]
