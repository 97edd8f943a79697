from __future__ import annotations

from typing import Any

import httpx


DEFAULT_HEADERS = {
    "Accept": "application/json",
    "User-Agent": "poolscope/0.1",
}


class HttpJsonClientError(RuntimeError):
    def __init__(self, message: str, *, status_code: int | None = None):
        super().__init__(message)
        self.status_code = status_code


class HttpJsonClient:
    """Thin JSON GET wrapper around one long-lived ``httpx.Client``.

    The underlying client is created once and only read afterwards, so a single
    instance may be shared by worker threads.
    """

    def __init__(self, *, timeout_seconds: float, transport: httpx.BaseTransport | None = None):
        self._client = httpx.Client(timeout=timeout_seconds, headers=DEFAULT_HEADERS, transport=transport)

    def get_json(self, url: str, *, params: dict[str, Any] | None = None) -> Any:
        try:
            response = self._client.get(url, params=params)
            response.raise_for_status()
            return response.json()
        except httpx.HTTPStatusError as exc:
            status = exc.response.status_code
            raise HttpJsonClientError(f"HTTP {status} for {url}", status_code=status) from exc
        except httpx.HTTPError as exc:
            raise HttpJsonClientError(f"request to {url} failed: {exc}") from exc
        except ValueError as exc:
            raise HttpJsonClientError(f"invalid JSON from {url}: {exc}") from exc

    def get_status(self, url: str) -> int:
        """Issue a GET and return the status code without raising on 4xx/5xx."""
        try:
            response = self._client.get(url)
        except httpx.HTTPError as exc:
            raise HttpJsonClientError(f"request to {url} failed: {exc}") from exc
        return response.status_code

    def close(self) -> None:
        self._client.close()
