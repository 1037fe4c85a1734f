"""HTTP adapter – async httpx client and remote dataset source."""
from grant_tracker.adapters.http.client import HttpxHttpClient
from grant_tracker.adapters.http.source import HttpDatasetSource

__all__ = ["HttpDatasetSource", "HttpxHttpClient"]
