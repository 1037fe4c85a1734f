"""
grant_tracker – dataset export core for the Asylum Office Grant Rate Tracker.

Import path convention::

    from grant_tracker.kernel.encoding import decode_base64
    from grant_tracker.kernel.errors import DecodeError, SourceUnavailableError
    from grant_tracker.application.export import DatasetExporter, download_csv
"""

__version__ = "0.1.0"
__all__ = ["__version__"]
