"""Response models returned by the Pub/Sub adapters."""

from dataclasses import dataclass, field
from typing import Optional


@dataclass
class Message:
    """Message data container matching GCP Pub/Sub structure."""

    data: bytes
    attributes: dict[str, str] = field(default_factory=dict)
    message_id: Optional[str] = None
    publish_time: Optional[str] = None

    def text(self, encoding: str = "utf-8") -> str:
        """Decode the payload as text."""
        return self.data.decode(encoding)


@dataclass
class ReceivedMessage:
    """Received message container matching GCP Pub/Sub structure."""

    message: Message
    ack_id: str

    @property
    def data(self) -> bytes:
        return self.message.data


@dataclass
class PullResponse:
    """Pull response container matching GCP Pub/Sub structure."""

    received_messages: list[ReceivedMessage]


@dataclass
class PublishFuture:
    """Future-like object for publish result."""

    message_id: str

    def result(self) -> str:
        """Return the message ID (blocking call for compatibility)."""
        return self.message_id
