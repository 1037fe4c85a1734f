"""HTTP adapter – HttpxHttpClient."""
from __future__ import annotations

from typing import Any

import httpx

from grant_tracker.kernel.errors import SourceUnavailableError


class HttpxHttpClient:
    """Thin async httpx wrapper; every transport failure becomes ``SourceUnavailableError``."""

    def __init__(self, base_url: str = "", timeout: float = 10.0, **kwargs: Any) -> None:
        self._client = httpx.AsyncClient(base_url=base_url, timeout=timeout, **kwargs)

    async def __aenter__(self) -> "HttpxHttpClient":
        await self._client.__aenter__()
        return self

    async def __aexit__(self, *args: Any) -> None:
        await self._client.__aexit__(*args)

    async def get(self, url: str, **kwargs: Any) -> httpx.Response:
        return await self._request("GET", url, **kwargs)

    async def _request(self, method: str, url: str, **kwargs: Any) -> httpx.Response:
        try:
            response = await self._client.request(method, url, **kwargs)
            response.raise_for_status()
            return response
        except httpx.TimeoutException as exc:
            raise SourceUnavailableError(
                url, f"HTTP request timed out: {method} {url}", cause=exc
            ) from exc
        except httpx.HTTPStatusError as exc:
            raise SourceUnavailableError(
                url,
                f"HTTP {exc.response.status_code} from {method} {url}",
                status_code=exc.response.status_code,
                cause=exc,
            ) from exc
        except httpx.InvalidURL as exc:
            raise SourceUnavailableError(url, f"Invalid dataset URL: {url!r}", cause=exc) from exc
        except httpx.HTTPError as exc:
            raise SourceUnavailableError(url, str(exc) or None, cause=exc) from exc


__all__ = ["HttpxHttpClient"]
