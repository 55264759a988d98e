"""JSON-over-HTTP transports for the Pub/Sub REST API."""

import logging
from typing import Any, Optional

import httpx

from courier.config import ClientConfig
from courier.errors import error_from_response

logger = logging.getLogger(__name__)


def _headers(config: ClientConfig) -> dict[str, str]:
    headers = {"Accept": "application/json"}
    if config.access_token:
        headers["Authorization"] = f"Bearer {config.access_token}"
    return headers


def _query(params: Optional[dict[str, Any]]) -> Optional[dict[str, Any]]:
    if not params:
        return None
    return {key: value for key, value in params.items() if value is not None}


def _decode(response: httpx.Response) -> dict[str, Any]:
    if response.is_error:
        raise error_from_response(response)
    if not response.content:
        return {}
    return response.json()


class HttpTransport:
    """
    Synchronous transport implementing the Transport protocol.

    Paths are resolved against ``{api_endpoint}/v1``. An ``httpx.Client`` may
    be injected (e.g. one built on ``httpx.MockTransport``) and stays open
    after ``close()``; otherwise one is created with the configured timeout
    and closed with the transport.
    """

    def __init__(self, config: ClientConfig, client: Optional[httpx.Client] = None):
        self._base_url = config.base_url
        self._headers = _headers(config)
        self._owns_client = client is None
        self._client = client or httpx.Client(timeout=config.timeout_seconds)

    def request(
        self,
        method: str,
        path: str,
        *,
        body: Optional[dict[str, Any]] = None,
        params: Optional[dict[str, Any]] = None,
        timeout: Optional[float] = None,
    ) -> dict[str, Any]:
        logger.debug("%s %s", method, path)
        extra: dict[str, Any] = {}
        if timeout is not None:
            extra["timeout"] = timeout
        response = self._client.request(
            method,
            f"{self._base_url}/{path}",
            json=body,
            params=_query(params),
            headers=self._headers,
            **extra,
        )
        return _decode(response)

    def close(self) -> None:
        """Close the HTTP client if this transport created it."""
        if self._owns_client:
            self._client.close()

    def __enter__(self) -> "HttpTransport":
        return self

    def __exit__(self, *args: object) -> None:
        self.close()


class AsyncHttpTransport:
    """Async transport implementing the AsyncTransport protocol over ``httpx.AsyncClient``."""

    def __init__(self, config: ClientConfig, client: Optional[httpx.AsyncClient] = None):
        self._base_url = config.base_url
        self._headers = _headers(config)
        self._owns_client = client is None
        self._client = client or httpx.AsyncClient(timeout=config.timeout_seconds)

    async def request(
        self,
        method: str,
        path: str,
        *,
        body: Optional[dict[str, Any]] = None,
        params: Optional[dict[str, Any]] = None,
        timeout: Optional[float] = None,
    ) -> dict[str, Any]:
        logger.debug("%s %s", method, path)
        extra: dict[str, Any] = {}
        if timeout is not None:
            extra["timeout"] = timeout
        response = await self._client.request(
            method,
            f"{self._base_url}/{path}",
            json=body,
            params=_query(params),
            headers=self._headers,
            **extra,
        )
        return _decode(response)

    async def close(self) -> None:
        if self._owns_client:
            await self._client.aclose()

    async def __aenter__(self) -> "AsyncHttpTransport":
        return self

    async def __aexit__(self, *args: object) -> None:
        await self.close()
