"""
Remote client for model endpoints that expose values over JSON/HTTP.

Each value is addressed by its path below the endpoint URL:

    GET  <endpoint>/<path>          read
    PUT  <endpoint>/<path>          write (JSON body)
    POST <endpoint>/<path>/invoke   invoke an operation (JSON array of arguments)

Calls are synchronous. Each one drives a short-lived ``aiohttp`` session on
its own event loop, so they must not be made from inside a running loop.
"""

from __future__ import annotations

import asyncio
import logging
from typing import Any, Optional
from urllib.parse import urlsplit

import aiohttp
import orjson

from assetlink.config import ConnectionSettings, get_connection_settings
from assetlink.exceptions import RemoteCommunicationError

logger = logging.getLogger(__name__)

_NO_BODY = object()

TRANSPORT_ERROR_TYPES = (
    aiohttp.ClientError,
    asyncio.TimeoutError,
    OSError,
)


def ensure_http_url(endpoint: str) -> str:
    """Ensure the endpoint uses an HTTP/HTTPS scheme and names a host."""
    parsed = urlsplit(endpoint)
    if parsed.scheme.lower() not in {"http", "https"}:
        raise ValueError(f"Unsupported URL scheme: {endpoint}")
    if not parsed.netloc:
        raise ValueError(f"URL missing network location: {endpoint}")
    return endpoint


class HttpRemoteClient:
    """Reads, writes and invokes model values on one HTTP endpoint."""

    # Reads return plain JSON scalars; see DataType.from_json
    json_values = True

    def __init__(self, endpoint: str, *, timeout_seconds: float) -> None:
        self.endpoint = ensure_http_url(endpoint).rstrip("/")
        self._timeout = aiohttp.ClientTimeout(total=timeout_seconds)

    def read_value(self, path: str) -> Any:
        return self._call("GET", path)

    def write_value(self, path: str, value: Any) -> None:
        self._call("PUT", path, value)

    def invoke_operation(self, path: str, *arguments: Any) -> Any:
        return self._call("POST", f"{path.rstrip('/')}/invoke", list(arguments))

    def _url(self, path: str) -> str:
        return f"{self.endpoint}/{path.lstrip('/')}"

    def _call(self, method: str, path: str, payload: Any = _NO_BODY) -> Any:
        url = self._url(path)
        logger.debug("%s %s", method, url)
        try:
            return asyncio.run(self._request(method, url, payload))
        except aiohttp.ClientResponseError as exc:
            raise RemoteCommunicationError(
                f"{method} {url} failed with HTTP {exc.status}",
                endpoint=self.endpoint,
                path=path,
                status=exc.status,
            ) from exc
        except TRANSPORT_ERROR_TYPES as exc:
            raise RemoteCommunicationError(
                f"{method} {url} failed: {exc}",
                endpoint=self.endpoint,
                path=path,
            ) from exc
        except orjson.JSONDecodeError as exc:
            raise RemoteCommunicationError(
                f"{method} {url} returned invalid JSON",
                endpoint=self.endpoint,
                path=path,
            ) from exc

    async def _request(self, method: str, url: str, payload: Any) -> Any:
        headers = {"Accept": "application/json"}
        data: Optional[bytes] = None
        if payload is not _NO_BODY:
            data = orjson.dumps(payload)
            headers["Content-Type"] = "application/json"

        async with aiohttp.ClientSession(timeout=self._timeout) as session:
            async with session.request(method, url, data=data, headers=headers) as response:
                response.raise_for_status()
                body = await response.read()

        if not body:
            return None
        return orjson.loads(body)

    def __repr__(self) -> str:
        return f"HttpRemoteClient({self.endpoint!r})"


def create_http_client(endpoint: str, settings: Optional[ConnectionSettings] = None) -> HttpRemoteClient:
    """Create a client for ``endpoint`` using the configured request timeout."""
    settings = settings or get_connection_settings()
    return HttpRemoteClient(endpoint, timeout_seconds=settings.request_timeout_seconds)


__all__ = ["HttpRemoteClient", "TRANSPORT_ERROR_TYPES", "create_http_client", "ensure_http_url"]
