"""Topic handle: publish, subscribe, delete."""

import logging
from collections.abc import Iterator, Mapping, Sequence
from typing import TYPE_CHECKING, Any, Optional, Union

from courier.errors import AlreadyExists, NotFound
from courier.models.resource import (
    ListTopicSubscriptionsBody,
    PushConfig,
    SubscriptionResource,
    TopicResource,
)
from courier.paths import short_name, topic_path
from courier.pubsub.query import ListQuery, iter_pages, resolve_query
from courier.pubsub.subscription import Subscription

if TYPE_CHECKING:
    from courier.pubsub.client import PubSub

logger = logging.getLogger(__name__)


class Topic:
    """
    A named channel messages are published to.

    Creating the handle makes no remote call; use ``PubSub.create_topic`` to
    create the topic on the service.
    """

    def __init__(self, pubsub: "PubSub", name: str):
        self.pubsub = pubsub
        self.name = topic_path(pubsub.project_id, name)

    @property
    def short_name(self) -> str:
        return short_name(self.name)

    def publish(
        self, messages: Union[Mapping[str, Any], Sequence[Mapping[str, Any]]]
    ) -> list[str]:
        """
        Publish one message or an ordered batch of messages.

        Each message is a mapping with ``data`` (str or bytes) and/or
        ``attributes`` (str -> str).

        Returns:
            Service-assigned message IDs, in order

        Raises:
            InvalidArgument: if the batch is empty or a message is malformed
        """
        if isinstance(messages, Mapping):
            messages = [messages]
        return self.pubsub.publisher.publish_batch(self.name, list(messages))

    def subscription(self, name: str) -> Subscription:
        """Return a handle for a subscription on this topic without creating it."""
        return Subscription(self.pubsub, name, topic=self)

    def subscribe(
        self,
        name: str,
        ack_deadline_seconds: Optional[int] = None,
        push_endpoint: Optional[str] = None,
        reuse_existing: bool = False,
    ) -> Subscription:
        """
        Create a subscription bound to this topic.

        Args:
            name: Subscription name or full path
            ack_deadline_seconds: Seconds a delivered message may stay
                unacknowledged before redelivery; service default if None
            push_endpoint: URL for push delivery; pull delivery if None
            reuse_existing: Return the existing subscription instead of
                raising AlreadyExists when it is bound to this topic

        Raises:
            AlreadyExists: if the name is taken and reuse_existing is False,
                or the existing subscription belongs to another topic
        """
        subscription = Subscription(
            self.pubsub, name, topic=self, ack_deadline_seconds=ack_deadline_seconds
        )
        resource = SubscriptionResource(
            name=subscription.name,
            topic=self.name,
            ack_deadline_seconds=ack_deadline_seconds,
            push_config=PushConfig(push_endpoint=push_endpoint) if push_endpoint else None,
        )
        body = resource.model_dump(by_alias=True, exclude_none=True, exclude={"name"})
        try:
            created = self.pubsub.transport.request("PUT", subscription.name, body=body)
        except AlreadyExists:
            if not reuse_existing:
                raise
            existing = subscription.get_metadata()
            if existing.topic != self.name:
                raise
            logger.debug("Reusing existing subscription %s", subscription.name)
            return subscription

        if created.get("ackDeadlineSeconds") is not None:
            subscription.ack_deadline_seconds = created["ackDeadlineSeconds"]
        logger.info("Created subscription %s on %s", subscription.name, self.name)
        return subscription

    def get_subscriptions(
        self,
        query: Optional[ListQuery] = None,
        *,
        max_results: Optional[int] = None,
        page_token: Optional[str] = None,
    ) -> tuple[list[Subscription], Optional[ListQuery]]:
        """List one page of the subscriptions attached to this topic."""
        query = resolve_query(query, max_results, page_token)
        response = self.pubsub.transport.request(
            "GET", f"{self.name}/subscriptions", params=query.params()
        )
        page = ListTopicSubscriptionsBody.model_validate(response)
        subscriptions = [self.subscription(name) for name in page.subscriptions]
        return subscriptions, query.next_page(page.next_page_token)

    def iter_subscriptions(self, max_results: Optional[int] = None) -> Iterator[Subscription]:
        return iter_pages(self.get_subscriptions, ListQuery(max_results=max_results))

    def get_metadata(self) -> TopicResource:
        return TopicResource.model_validate(self.pubsub.transport.request("GET", self.name))

    def exists(self) -> bool:
        try:
            self.get_metadata()
        except NotFound:
            return False
        return True

    def delete(self) -> bool:
        """
        Delete the topic. The service detaches its subscriptions.

        Returns:
            False if it was already gone
        """
        try:
            self.pubsub.transport.request("DELETE", self.name)
        except NotFound:
            logger.debug("Topic %s already deleted", self.name)
            return False
        logger.info("Deleted topic %s", self.name)
        return True

    def __repr__(self) -> str:
        return f"Topic({self.name!r})"
