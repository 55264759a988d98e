"""Project-scoped entry point to the Pub/Sub service."""

import logging
from collections.abc import Iterator
from typing import Optional

import httpx

from courier.adapters.http import HttpPublisher, HttpSubscriber, HttpTransport
from courier.config import ClientConfig
from courier.models.resource import ListSubscriptionsBody, ListTopicsBody
from courier.protocols.transport import Transport
from courier.pubsub.fanout import fan_out
from courier.pubsub.query import ListQuery, iter_pages, resolve_query
from courier.pubsub.subscription import Subscription
from courier.pubsub.topic import Topic

logger = logging.getLogger(__name__)

# Topic name the service reports for subscriptions whose topic was deleted
DELETED_TOPIC = "_deleted-topic_"


class PubSub:
    """
    Client for one project's topics and subscriptions.

    Every operation is a single remote call (bulk deletes are a fan-out of
    single calls). Service errors are raised as ApiError subclasses and never
    retried.
    """

    def __init__(self, project_id: str, transport: Transport, max_workers: int = 8):
        """
        Args:
            project_id: Project that scopes topic and subscription names
            transport: Transport used for every call
            max_workers: Thread pool size for bulk deletes
        """
        self.project_id = project_id
        self.transport = transport
        self.publisher = HttpPublisher(transport)
        self.subscriber = HttpSubscriber(transport)
        self.max_workers = max_workers

    @classmethod
    def from_config(cls, config: ClientConfig, client: Optional[httpx.Client] = None) -> "PubSub":
        return cls(
            config.project_id,
            HttpTransport(config, client=client),
            max_workers=config.max_workers,
        )

    def topic(self, name: str) -> Topic:
        return Topic(self, name)

    def subscription(self, name: str) -> Subscription:
        return Subscription(self, name)

    def create_topic(self, name: str) -> Topic:
        """
        Create a topic.

        Raises:
            AlreadyExists: if a topic with this name exists
        """
        topic = self.topic(name)
        self.transport.request("PUT", topic.name, body={})
        logger.info("Created topic %s", topic.name)
        return topic

    def get_topics(
        self,
        query: Optional[ListQuery] = None,
        *,
        max_results: Optional[int] = None,
        page_token: Optional[str] = None,
    ) -> tuple[list[Topic], Optional[ListQuery]]:
        """
        List one page of the project's topics.

        Returns:
            The topics and, if more remain, the query for the next page
        """
        query = resolve_query(query, max_results, page_token)
        response = self.transport.request(
            "GET", f"projects/{self.project_id}/topics", params=query.params()
        )
        page = ListTopicsBody.model_validate(response)
        topics = [self.topic(resource.name) for resource in page.topics]
        return topics, query.next_page(page.next_page_token)

    def iter_topics(self, max_results: Optional[int] = None) -> Iterator[Topic]:
        return iter_pages(self.get_topics, ListQuery(max_results=max_results))

    def get_subscriptions(
        self,
        query: Optional[ListQuery] = None,
        *,
        max_results: Optional[int] = None,
        page_token: Optional[str] = None,
    ) -> tuple[list[Subscription], Optional[ListQuery]]:
        """List one page of the project's subscriptions across all topics."""
        query = resolve_query(query, max_results, page_token)
        response = self.transport.request(
            "GET", f"projects/{self.project_id}/subscriptions", params=query.params()
        )
        page = ListSubscriptionsBody.model_validate(response)
        subscriptions = [
            Subscription(
                self,
                resource.name,
                topic=None if resource.topic == DELETED_TOPIC else self.topic(resource.topic),
                ack_deadline_seconds=resource.ack_deadline_seconds,
            )
            for resource in page.subscriptions
        ]
        return subscriptions, query.next_page(page.next_page_token)

    def iter_subscriptions(self, max_results: Optional[int] = None) -> Iterator[Subscription]:
        return iter_pages(self.get_subscriptions, ListQuery(max_results=max_results))

    def delete_all_topics(self) -> int:
        """Delete every topic in the project in parallel. Returns how many were deleted."""
        topics = list(self.iter_topics())
        deleted = fan_out([topic.delete for topic in topics], self.max_workers)
        logger.info("Deleted %d of %d topic(s)", sum(deleted), len(topics))
        return sum(deleted)

    def delete_all_subscriptions(self) -> int:
        """Delete every subscription in the project in parallel. Returns how many were deleted."""
        subscriptions = list(self.iter_subscriptions())
        deleted = fan_out([sub.delete for sub in subscriptions], self.max_workers)
        logger.info("Deleted %d of %d subscription(s)", sum(deleted), len(subscriptions))
        return sum(deleted)

    def close(self) -> None:
        self.transport.close()

    def __enter__(self) -> "PubSub":
        return self

    def __exit__(self, *args: object) -> None:
        self.close()
