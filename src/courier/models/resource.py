"""Wire models for Pub/Sub REST resources and list/publish/pull bodies."""

from typing import Optional

from courier.models.base import CamelCaseModel


class PushConfig(CamelCaseModel):
    """Empty for pull subscriptions."""

    push_endpoint: Optional[str] = None
    attributes: Optional[dict[str, str]] = None


class TopicResource(CamelCaseModel):
    """A topic as returned by ``GET projects/{project}/topics/{topic}``."""

    name: str
    labels: Optional[dict[str, str]] = None


class SubscriptionResource(CamelCaseModel):
    """A subscription as returned by ``GET projects/{project}/subscriptions/{sub}``."""

    name: str
    topic: str
    ack_deadline_seconds: Optional[int] = None
    push_config: Optional[PushConfig] = None


class PubsubMessage(CamelCaseModel):
    """Message as it travels on the wire; ``data`` is base64 text."""

    data: Optional[str] = None
    attributes: Optional[dict[str, str]] = None
    message_id: Optional[str] = None
    publish_time: Optional[str] = None


class WireReceivedMessage(CamelCaseModel):
    ack_id: str
    message: PubsubMessage
    delivery_attempt: Optional[int] = None


class PullBody(CamelCaseModel):
    received_messages: list[WireReceivedMessage] = []


class PublishBody(CamelCaseModel):
    message_ids: list[str] = []


class ListTopicsBody(CamelCaseModel):
    topics: list[TopicResource] = []
    next_page_token: Optional[str] = None


class ListSubscriptionsBody(CamelCaseModel):
    subscriptions: list[SubscriptionResource] = []
    next_page_token: Optional[str] = None


class ListTopicSubscriptionsBody(CamelCaseModel):
    """Topic-scoped listing; the service returns subscription names only."""

    subscriptions: list[str] = []
    next_page_token: Optional[str] = None
