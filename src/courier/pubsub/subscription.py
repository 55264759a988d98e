"""Subscription handle: pull, acknowledge, delete."""

import logging
from collections.abc import Sequence
from typing import TYPE_CHECKING, Optional, Union

from courier.errors import NotFound
from courier.models.resource import SubscriptionResource
from courier.models.response import ReceivedMessage
from courier.paths import short_name, subscription_path

if TYPE_CHECKING:
    from courier.pubsub.client import PubSub
    from courier.pubsub.topic import Topic

logger = logging.getLogger(__name__)

DEFAULT_MAX_RESULTS = 1000


def _ack_id_list(ack_ids: Union[str, Sequence[str]]) -> list[str]:
    if isinstance(ack_ids, str):
        return [ack_ids]
    return list(ack_ids)


class Subscription:
    """
    A named, topic-bound feed of messages.

    Creating the handle makes no remote call; use ``Topic.subscribe`` to
    create the subscription on the service.
    """

    def __init__(
        self,
        pubsub: "PubSub",
        name: str,
        topic: Optional["Topic"] = None,
        ack_deadline_seconds: Optional[int] = None,
    ):
        self.pubsub = pubsub
        self.name = subscription_path(pubsub.project_id, name)
        self.topic = topic
        self.ack_deadline_seconds = ack_deadline_seconds

    @property
    def short_name(self) -> str:
        return short_name(self.name)

    def pull(
        self,
        return_immediately: bool = False,
        max_results: int = DEFAULT_MAX_RESULTS,
        timeout: Optional[float] = None,
    ) -> list[ReceivedMessage]:
        """
        Pull up to ``max_results`` delivered messages.

        Args:
            return_immediately: Return whatever is available now, possibly
                nothing, instead of waiting for messages
            max_results: Upper bound on the number of messages returned
            timeout: HTTP timeout in seconds for this call

        Raises:
            NotFound: if the subscription does not exist
        """
        response = self.pubsub.subscriber.pull(
            request={
                "subscription": self.name,
                "max_messages": max_results,
                "return_immediately": return_immediately,
            },
            timeout=timeout,
        )
        return response.received_messages

    def ack(self, ack_ids: Union[str, Sequence[str]]) -> None:
        """Acknowledge one ack ID or a sequence of them."""
        self.pubsub.subscriber.acknowledge(
            request={"subscription": self.name, "ack_ids": _ack_id_list(ack_ids)}
        )

    def modify_ack_deadline(self, ack_ids: Union[str, Sequence[str]], seconds: int) -> None:
        """Extend the ack deadline of delivered messages; 0 makes them redeliverable now."""
        self.pubsub.subscriber.modify_ack_deadline(
            request={
                "subscription": self.name,
                "ack_ids": _ack_id_list(ack_ids),
                "ack_deadline_seconds": seconds,
            }
        )

    def get_metadata(self) -> SubscriptionResource:
        body = self.pubsub.transport.request("GET", self.name)
        resource = SubscriptionResource.model_validate(body)
        self.ack_deadline_seconds = resource.ack_deadline_seconds
        return resource

    def delete(self) -> bool:
        """
        Delete the subscription.

        Returns:
            False if it was already gone
        """
        try:
            self.pubsub.transport.request("DELETE", self.name)
        except NotFound:
            logger.debug("Subscription %s already deleted", self.name)
            return False
        logger.info("Deleted subscription %s", self.name)
        return True

    def __repr__(self) -> str:
        return f"Subscription({self.name!r})"
