"""HTTP adapter – HttpDatasetSource."""
from __future__ import annotations

from typing import Any

import httpx

from grant_tracker.adapters.http.client import HttpxHttpClient
from grant_tracker.kernel.errors import SourceUnavailableError


def _is_json(content_type: str) -> bool:
    media_type = content_type.split(";", 1)[0].strip().lower()
    return media_type == "application/json" or media_type.endswith("+json")


class HttpDatasetSource:
    """Fetches the encoded dataset from a remote endpoint.

    The body is used as-is (minus surrounding whitespace) unless the response
    is JSON, in which case the payload is read from ``payload_key`` or the
    document itself when it is a bare JSON string.

    Pass *client* to share one connection pool; otherwise a short-lived client
    is opened per fetch.
    """

    def __init__(
        self,
        url: str,
        *,
        client: HttpxHttpClient | None = None,
        timeout: float = 10.0,
        headers: dict[str, str] | None = None,
        payload_key: str = "data",
    ) -> None:
        self.url = url
        self.name = url
        self._client = client
        self._timeout = timeout
        self._headers = headers or {}
        self._payload_key = payload_key

    async def fetch(self) -> str:
        if self._client is not None:
            response = await self._client.get(self.url, headers=self._headers)
        else:
            async with HttpxHttpClient(timeout=self._timeout) as client:
                response = await client.get(self.url, headers=self._headers)
        return self._payload_from(response)

    def _payload_from(self, response: httpx.Response) -> str:
        if not _is_json(response.headers.get("content-type", "")):
            return response.text.strip()

        try:
            document: Any = response.json()
        except ValueError as exc:
            raise SourceUnavailableError(self.url, "Response is not valid JSON", cause=exc) from exc

        if isinstance(document, dict):
            document = document.get(self._payload_key)
        if not isinstance(document, str):
            raise SourceUnavailableError(
                self.url,
                f"JSON response has no string field '{self._payload_key}'",
            )
        return document.strip()


__all__ = ["HttpDatasetSource"]
