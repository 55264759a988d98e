"""Transport protocol definitions."""

from typing import Any, Optional, Protocol, runtime_checkable


@runtime_checkable
class Transport(Protocol):
    """Synchronous protocol for JSON request/response calls against the Pub/Sub API."""

    def request(
        self,
        method: str,
        path: str,
        *,
        body: Optional[dict[str, Any]] = None,
        params: Optional[dict[str, Any]] = None,
        timeout: Optional[float] = None,
    ) -> dict[str, Any]:
        """
        Send one API call and return the decoded JSON body.

        Args:
            method: HTTP method
            path: Resource path relative to the API root (e.g. 'projects/p/topics/t:publish')
            body: JSON request body
            params: Query string parameters; None values are dropped
            timeout: Per-call timeout in seconds, overriding the client default

        Raises:
            ApiError: if the service responds with a non-2xx status
        """
        ...

    def close(self) -> None:
        """Release pooled connections."""
        ...


@runtime_checkable
class AsyncTransport(Protocol):
    """Async protocol for JSON request/response calls against the Pub/Sub API."""

    async def request(
        self,
        method: str,
        path: str,
        *,
        body: Optional[dict[str, Any]] = None,
        params: Optional[dict[str, Any]] = None,
        timeout: Optional[float] = None,
    ) -> dict[str, Any]:
        """
        Send one API call and return the decoded JSON body.

        Raises:
            ApiError: if the service responds with a non-2xx status
        """
        ...

    async def close(self) -> None:
        """Release pooled connections."""
        ...
