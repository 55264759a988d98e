"""Subscriber protocol definitions."""

from typing import Optional, Protocol, runtime_checkable

from courier.models.request import AcknowledgeRequest, PullRequest
from courier.models.response import PullResponse


@runtime_checkable
class PubSubSubscriber(Protocol):
    """
    Synchronous protocol for pulling and acknowledging Pub/Sub messages.

    Consumers depend on this protocol only, so any object with these two
    methods (an HTTP adapter, a test double) can feed them.
    """

    def pull(self, request: PullRequest, timeout: Optional[float] = None) -> PullResponse:
        """
        Pull up to ``request["max_messages"]`` messages.

        Args:
            request: Subscription path, batch bound and optional return_immediately
            timeout: Seconds to wait for the call; None leaves it to the transport

        Raises:
            NotFound: if the subscription does not exist
        """
        ...

    def acknowledge(self, request: AcknowledgeRequest) -> None:
        """Mark the messages behind ``request["ack_ids"]`` as processed."""
        ...


@runtime_checkable
class AsyncPubSubSubscriber(Protocol):
    """Async protocol for pulling and acknowledging Pub/Sub messages."""

    async def pull(self, request: PullRequest, timeout: Optional[float] = None) -> PullResponse:
        ...

    async def acknowledge(self, request: AcknowledgeRequest) -> None:
        ...
