"""Conversions between client-side messages and Pub/Sub wire bodies."""

import base64
from collections.abc import Mapping, Sequence
from typing import Any, Union

from courier.errors import InvalidArgument
from courier.models.request import AcknowledgeRequest, ModifyAckDeadlineRequest, PullRequest
from courier.models.resource import PublishBody, PubsubMessage, PullBody
from courier.models.response import Message, PullResponse, ReceivedMessage


def encode_data(data: Union[str, bytes]) -> str:
    """Base64-encode a payload; text is UTF-8 encoded first."""
    if isinstance(data, str):
        data = data.encode("utf-8")
    return base64.b64encode(data).decode("ascii")


def build_message(message: Mapping[str, Any]) -> dict[str, Any]:
    """
    Validate one ``{"data": ..., "attributes": {...}}`` mapping and encode it.

    Raises:
        InvalidArgument: if the message is malformed
    """
    if not isinstance(message, Mapping):
        raise InvalidArgument(f"Cannot publish message of type {type(message).__name__}.")

    data = message.get("data")
    attributes = message.get("attributes") or {}
    if data is None and not attributes:
        raise InvalidArgument("Cannot publish message without a `data` property.")
    if data is not None and not isinstance(data, (str, bytes)):
        raise InvalidArgument(f"Message data must be str or bytes, not {type(data).__name__}.")
    if not isinstance(attributes, Mapping) or not all(
        isinstance(key, str) and isinstance(value, str) for key, value in attributes.items()
    ):
        raise InvalidArgument("Message attributes must map strings to strings.")

    wire = PubsubMessage(
        data=encode_data(data) if data is not None else None,
        attributes=dict(attributes) or None,
    )
    return wire.to_wire()


def build_publish_body(messages: Sequence[Mapping[str, Any]]) -> dict[str, Any]:
    if not messages:
        raise InvalidArgument("Cannot publish without a message.")
    return {"messages": [build_message(message) for message in messages]}


def parse_publish_response(body: dict[str, Any]) -> list[str]:
    return PublishBody.model_validate(body).message_ids


def build_pull_body(request: PullRequest) -> dict[str, Any]:
    return {
        "returnImmediately": request.get("return_immediately", False),
        "maxMessages": request["max_messages"],
    }


def parse_pull_response(body: dict[str, Any]) -> PullResponse:
    """Decode a pull response; an empty body means no messages were available."""
    received = []
    for item in PullBody.model_validate(body).received_messages:
        wire = item.message
        received.append(
            ReceivedMessage(
                message=Message(
                    data=base64.b64decode(wire.data) if wire.data else b"",
                    attributes=wire.attributes or {},
                    message_id=wire.message_id,
                    publish_time=wire.publish_time,
                ),
                ack_id=item.ack_id,
            )
        )
    return PullResponse(received_messages=received)


def build_ack_body(request: AcknowledgeRequest) -> dict[str, Any]:
    if not request["ack_ids"]:
        raise InvalidArgument("At least one ackId is required.")
    return {"ackIds": list(request["ack_ids"])}


def build_modify_ack_deadline_body(request: ModifyAckDeadlineRequest) -> dict[str, Any]:
    if not request["ack_ids"]:
        raise InvalidArgument("At least one ackId is required.")
    return {
        "ackIds": list(request["ack_ids"]),
        "ackDeadlineSeconds": request["ack_deadline_seconds"],
    }
