"""Async HTTP transport capability.

This module defines the ``Api`` capability consumed by the store and
query layers and its httpx-backed implementation. Failed calls surface
as ``StrataApiError`` carrying the HTTP status code.
"""

from __future__ import annotations

import threading
from typing import Any, Protocol, Sequence

import httpx

from core.config import StrataConfig
from core.errors import StrataApiError
from core.logging_config import get_logger

_LOGGER = get_logger(__name__)

QueryParams = Sequence[tuple[str, str]]


class Api(Protocol):
    """Transport capability used by stores, namespaces and queries."""

    async def get(self, path: str, params: QueryParams | None = None) -> Any: ...

    async def post(self, path: str, data: Any) -> Any: ...

    async def put(self, path: str, data: Any) -> Any: ...

    async def delete(self, path: str) -> Any: ...


class HttpApi:
    """JSON-over-HTTP transport built on ``httpx.AsyncClient``."""

    _shared: "HttpApi | None" = None
    _shared_lock = threading.Lock()

    def __init__(
        self,
        config: StrataConfig | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """Create transport.

        Args:
            config: Optional runtime configuration.
            transport: Optional httpx transport, mainly for tests.
        """
        self._config = config or StrataConfig.from_env()
        self._transport = transport

    async def get(self, path: str, params: QueryParams | None = None) -> Any:
        """Issue a GET and return the decoded body."""
        return await self._request("GET", path, params=params)

    async def post(self, path: str, data: Any) -> Any:
        """Issue a POST with a JSON body."""
        return await self._request("POST", path, data=data)

    async def put(self, path: str, data: Any) -> Any:
        """Issue a PUT with a JSON body."""
        return await self._request("PUT", path, data=data)

    async def delete(self, path: str) -> Any:
        """Issue a DELETE and return the decoded body."""
        return await self._request("DELETE", path)

    async def _request(
        self,
        method: str,
        path: str,
        params: QueryParams | None = None,
        data: Any = None,
    ) -> Any:
        """Send one request and decode its response.

        Args:
            method: HTTP verb.
            path: Path relative to the configured base URL.
            params: Optional repeated query parameters.
            data: Optional JSON body.

        Returns:
            Decoded JSON payload, raw text for non-JSON bodies, or None
            for empty bodies.

        Raises:
            StrataApiError: If the request fails or returns a non-2xx status.
        """
        url = f"{self._config.base_url}/{path.lstrip('/')}"
        _LOGGER.debug("http_request", method=method, url=url)
        request_kwargs: dict[str, Any] = {}
        if params:
            request_kwargs["params"] = list(params)
        if data is not None:
            request_kwargs["json"] = data
        try:
            async with httpx.AsyncClient(
                timeout=self._config.timeout_seconds,
                transport=self._transport,
            ) as client:
                response = await client.request(method, url, **request_kwargs)
        except httpx.HTTPError as error:
            raise StrataApiError(
                f"{method} {url} failed before a response was received: {error}",
                url=url,
            ) from error
        payload = _decode_body(response)
        if response.is_error:
            _LOGGER.warning(
                "http_request_failed",
                method=method,
                url=url,
                status=response.status_code,
            )
            raise StrataApiError(
                f"{method} {url} failed with HTTP {response.status_code}",
                http_status_code=response.status_code,
                url=url,
                payload=payload,
            )
        return payload

    @classmethod
    def get_api(cls) -> "HttpApi":
        """Return the shared transport, creating it from the environment once."""
        with cls._shared_lock:
            if cls._shared is None:
                cls._shared = cls()
            return cls._shared

    @classmethod
    def set_api(cls, api: "HttpApi | None") -> None:
        """Replace the shared transport; ``None`` forces lazy re-creation."""
        with cls._shared_lock:
            cls._shared = api


def _decode_body(response: httpx.Response) -> Any:
    if not response.content:
        return None
    try:
        return response.json()
    except ValueError:
        return response.text
