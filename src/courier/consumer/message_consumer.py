"""Generic synchronous message consumer for Pub/Sub."""

import json
import logging
from typing import Optional, Type

from pydantic import BaseModel

from courier.models.response import ReceivedMessage
from courier.protocols.handler import MessageHandler
from courier.protocols.subscriber import PubSubSubscriber

logger = logging.getLogger(__name__)


class MessageConsumer:
    """
    Generic synchronous message consumer for Pub/Sub.

    Responsibilities:
    - Pull batches from the subscription
    - Parse and validate JSON (using Pydantic)
    - Route to handler
    - Acknowledge each message once its handler returns

    A message whose parsing, validation or handling raises is left
    unacknowledged and the exception propagates out of the loop; the
    service redelivers the message after its ack deadline.
    """

    def __init__(
        self,
        subscription: str,
        handler: MessageHandler,
        request_model: Type[BaseModel],
        subscriber: PubSubSubscriber,
        max_messages: int = 1,
        timeout: Optional[float] = 30,
    ):
        """
        Initialize synchronous message consumer.

        Args:
            subscription: Pub/Sub subscription path
            handler: Message handler implementing MessageHandler protocol
            request_model: Pydantic model for validating messages
            subscriber: Subscriber adapter for pulling messages
            max_messages: Upper bound on messages per pull
            timeout: Pull timeout in seconds
        """
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

    def _validate(self, received_message: ReceivedMessage) -> BaseModel:
        message_data = json.loads(received_message.message.data)
        return self.request_model(**message_data)

    def process_batch(self) -> int:
        """
        Pull one batch and process it synchronously.

        Returns:
            Number of messages handled and acknowledged
        """
        response = self.subscriber.pull(
            request={"subscription": self.subscription, "max_messages": self.max_messages},
            timeout=self.timeout,
        )

        handled = 0
        for received_message in response.received_messages:
            request = self._validate(received_message)
            self.handler.handle(request)
            self.subscriber.acknowledge(
                request={"subscription": self.subscription, "ack_ids": [received_message.ack_id]}
            )
            handled += 1

        if handled:
            logger.debug("Handled %d message(s) from %s", handled, self.subscription)
        return handled

    def run(self) -> None:
        """
        Run the synchronous message consumer loop.

        Continuously processes messages from the subscription while running.
        Call start() before run(), and stop() to exit the loop.
        """
        while self._running:
            self.process_batch()
