"""Generic async message consumer for Pub/Sub."""

import json
import logging
from typing import Optional, Type

from pydantic import BaseModel

from courier.protocols.handler import AsyncMessageHandler
from courier.protocols.subscriber import AsyncPubSubSubscriber

logger = logging.getLogger(__name__)


class AsyncMessageConsumer:
    """
    Generic asynchronous message consumer for Pub/Sub.

    Same contract as MessageConsumer with awaited pull, handle and
    acknowledge calls.
    """

    def __init__(
        self,
        subscription: str,
        handler: AsyncMessageHandler,
        request_model: Type[BaseModel],
        subscriber: AsyncPubSubSubscriber,
        max_messages: int = 1,
        timeout: Optional[float] = 30,
    ):
        self.subscription = subscription
        self.handler = handler
        self.request_model = request_model
        self.subscriber = subscriber
        self.max_messages = max_messages
        self.timeout = timeout
        self._running = False

    def start(self) -> None:
        """Start the message consumer."""
        self._running = True

    def stop(self) -> None:
        """Stop the message consumer."""
        self._running = False

    async def process_batch(self) -> int:
        """
        Pull one batch and process it asynchronously.

        Returns:
            Number of messages handled and acknowledged
        """
        response = await self.subscriber.pull(
            request={"subscription": self.subscription, "max_messages": self.max_messages},
            timeout=self.timeout,
        )

        handled = 0
        for received_message in response.received_messages:
            message_data = json.loads(received_message.message.data)
            request = self.request_model(**message_data)
            await self.handler.handle(request)
            await self.subscriber.acknowledge(
                request={"subscription": self.subscription, "ack_ids": [received_message.ack_id]}
            )
            handled += 1

        if handled:
            logger.debug("Handled %d message(s) from %s", handled, self.subscription)
        return handled

    async def run(self) -> None:
        """
        Run the async message consumer loop.

        Call start() before run(), and stop() to exit the loop.
        """
        while self._running:
            await self.process_batch()
