"""Topic and subscription facade over the Pub/Sub REST API."""

from courier.pubsub.client import PubSub
from courier.pubsub.query import ListQuery
from courier.pubsub.subscription import Subscription
from courier.pubsub.topic import Topic

__all__ = ["ListQuery", "PubSub", "Subscription", "Topic"]
