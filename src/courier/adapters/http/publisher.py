"""HTTP publisher implementing PubSubPublisher protocol."""

import logging
from collections.abc import Mapping, Sequence
from typing import Any

from courier.adapters.http.codec import build_publish_body, parse_publish_response
from courier.models.response import PublishFuture
from courier.protocols.transport import AsyncTransport, Transport

logger = logging.getLogger(__name__)


class HttpPublisher:
    """
    Publisher over the Pub/Sub REST API.

    Topic format: full path, "projects/PROJECT_ID/topics/TOPIC_NAME".
    """

    def __init__(self, transport: Transport):
        self._transport = transport

    def publish(self, topic: str, data: bytes, **attributes: str) -> PublishFuture:
        """
        Publish a single message.

        Args:
            topic: Full topic path
            data: Message data as bytes (str is UTF-8 encoded)
            **attributes: Message attributes

        Returns:
            PublishFuture with the service-assigned message ID
        """
        message_ids = self.publish_batch(topic, [{"data": data, "attributes": attributes}])
        return PublishFuture(message_id=message_ids[0])

    def publish_batch(self, topic: str, messages: Sequence[Mapping[str, Any]]) -> list[str]:
        """
        Publish an ordered batch of ``{"data", "attributes"}`` mappings in one call.

        Returns:
            Message IDs in the order the messages were given
        """
        body = build_publish_body(messages)
        response = self._transport.request("POST", f"{topic}:publish", body=body)
        message_ids = parse_publish_response(response)
        logger.debug("Published %d message(s) to %s", len(message_ids), topic)
        return message_ids


class AsyncHttpPublisher:
    """Async publisher over the Pub/Sub REST API."""

    def __init__(self, transport: AsyncTransport):
        self._transport = transport

    async def publish(self, topic: str, data: bytes, **attributes: str) -> PublishFuture:
        message_ids = await self.publish_batch(topic, [{"data": data, "attributes": attributes}])
        return PublishFuture(message_id=message_ids[0])

    async def publish_batch(self, topic: str, messages: Sequence[Mapping[str, Any]]) -> list[str]:
        body = build_publish_body(messages)
        response = await self._transport.request("POST", f"{topic}:publish", body=body)
        message_ids = parse_publish_response(response)
        logger.debug("Published %d message(s) to %s", len(message_ids), topic)
        return message_ids
