"""HTTP subscriber implementing PubSubSubscriber protocol."""

import logging
from typing import Optional

from courier.adapters.http.codec import (
    build_ack_body,
    build_modify_ack_deadline_body,
    build_pull_body,
    parse_pull_response,
)
from courier.models.request import AcknowledgeRequest, ModifyAckDeadlineRequest, PullRequest
from courier.models.response import PullResponse
from courier.protocols.transport import AsyncTransport, Transport

logger = logging.getLogger(__name__)


class HttpSubscriber:
    """
    Subscriber over the Pub/Sub REST API.

    Ack IDs come from the service and are passed back untouched; no delivery
    state is kept on the client.
    """

    def __init__(self, transport: Transport):
        self._transport = transport

    def pull(self, request: PullRequest, timeout: Optional[float] = None) -> PullResponse:
        """
        Pull up to ``max_messages`` messages from a subscription.

        Args:
            request: PullRequest with subscription path, max_messages and
                optionally return_immediately
            timeout: Timeout in seconds for the HTTP call; None uses the
                transport default

        Returns:
            PullResponse with received messages (possibly empty)

        Raises:
            NotFound: if the subscription does not exist
        """
        response = self._transport.request(
            "POST",
            f"{request['subscription']}:pull",
            body=build_pull_body(request),
            timeout=timeout,
        )
        pulled = parse_pull_response(response)
        logger.debug(
            "Pulled %d message(s) from %s", len(pulled.received_messages), request["subscription"]
        )
        return pulled

    def acknowledge(self, request: AcknowledgeRequest) -> None:
        """
        Acknowledge messages by their ack_ids.

        Args:
            request: AcknowledgeRequest with subscription and ack_ids
        """
        self._transport.request(
            "POST", f"{request['subscription']}:acknowledge", body=build_ack_body(request)
        )

    def modify_ack_deadline(self, request: ModifyAckDeadlineRequest) -> None:
        """Reset the ack deadline of delivered messages; 0 releases them for redelivery."""
        self._transport.request(
            "POST",
            f"{request['subscription']}:modifyAckDeadline",
            body=build_modify_ack_deadline_body(request),
        )


class AsyncHttpSubscriber:
    """Async subscriber over the Pub/Sub REST API."""

    def __init__(self, transport: AsyncTransport):
        self._transport = transport

    async def pull(self, request: PullRequest, timeout: Optional[float] = None) -> PullResponse:
        response = await self._transport.request(
            "POST",
            f"{request['subscription']}:pull",
            body=build_pull_body(request),
            timeout=timeout,
        )
        pulled = parse_pull_response(response)
        logger.debug(
            "Pulled %d message(s) from %s", len(pulled.received_messages), request["subscription"]
        )
        return pulled

    async def acknowledge(self, request: AcknowledgeRequest) -> None:
        await self._transport.request(
            "POST", f"{request['subscription']}:acknowledge", body=build_ack_body(request)
        )

    async def modify_ack_deadline(self, request: ModifyAckDeadlineRequest) -> None:
        await self._transport.request(
            "POST",
            f"{request['subscription']}:modifyAckDeadline",
            body=build_modify_ack_deadline_body(request),
        )
