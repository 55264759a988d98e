"""Publisher protocol definitions."""

from collections.abc import Mapping, Sequence
from typing import Any, Protocol, runtime_checkable

from courier.models.response import PublishFuture


@runtime_checkable
class PubSubPublisher(Protocol):
    """Synchronous protocol for publishing to Pub/Sub topics."""

    def publish(self, topic: str, data: bytes, **attributes: str) -> PublishFuture:
        """
        Publish one message.

        Args:
            topic: Full topic path ('projects/PROJECT_ID/topics/TOPIC_NAME')
            data: Message payload
            **attributes: String attributes attached to the message

        Returns:
            PublishFuture resolving to the service-assigned message ID
        """
        ...

    def publish_batch(self, topic: str, messages: Sequence[Mapping[str, Any]]) -> list[str]:
        """Publish ``{"data", "attributes"}`` mappings in one call; IDs come back in order."""
        ...


@runtime_checkable
class AsyncPubSubPublisher(Protocol):
    """Async protocol for publishing to Pub/Sub topics."""

    async def publish(self, topic: str, data: bytes, **attributes: str) -> PublishFuture:
        ...

    async def publish_batch(self, topic: str, messages: Sequence[Mapping[str, Any]]) -> list[str]:
        ...
