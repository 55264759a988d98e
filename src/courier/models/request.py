"""Request models for Pub/Sub operations."""

from typing import NotRequired, TypedDict


class PullRequest(TypedDict):
    """Request for pulling messages from a subscription."""

    subscription: str
    max_messages: int
    return_immediately: NotRequired[bool]


class AcknowledgeRequest(TypedDict):
    """Request for acknowledging messages."""

    subscription: str
    ack_ids: list[str]


class ModifyAckDeadlineRequest(TypedDict):
    """Request for extending or releasing the ack deadline of delivered messages."""

    subscription: str
    ack_ids: list[str]
    ack_deadline_seconds: int
