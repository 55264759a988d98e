"""Message handler protocol definitions."""

from typing import Protocol, runtime_checkable

from pydantic import BaseModel


@runtime_checkable
class MessageHandler(Protocol):
    """
    Synchronous protocol for consumer message handlers.

    A handler receives the pydantic model validated from one pulled message.
    Returning normally lets the consumer acknowledge the message; raising
    leaves it unacknowledged so the service redelivers it once the ack
    deadline passes.
    """

    def handle(self, request: BaseModel) -> None:
        """Process one validated request."""
        ...


@runtime_checkable
class AsyncMessageHandler(Protocol):
    """Async twin of MessageHandler, awaited by AsyncMessageConsumer."""

    async def handle(self, request: BaseModel) -> None:
        """Process one validated request."""
        ...
