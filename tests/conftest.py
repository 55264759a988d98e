"""Shared fixtures: an in-memory Pub/Sub service behind httpx.MockTransport."""

import itertools
import json
import re
import threading
from collections import deque

import httpx
import pytest

from courier.config import ClientConfig
from courier.pubsub import PubSub

PROJECT = "test-project"

_ROUTE = re.compile(
    r"^/v1/projects/(?P<project>[^/]+)/(?P<kind>topics|subscriptions)"
    r"(?:/(?P<name>[^/:]+))?(?P<nested>/subscriptions)?(?::(?P<verb>\w+))?$"
)


def _ok(payload: dict) -> httpx.Response:
    return httpx.Response(200, json=payload)


def _error(code: int, status: str, message: str) -> httpx.Response:
    return httpx.Response(code, json={"error": {"code": code, "message": message, "status": status}})


def _page(items: list, params) -> tuple[list, str | None]:
    size = int(params.get("pageSize") or 0) or len(items) or 1
    start = int(params.get("pageToken") or 0)
    end = start + size
    return items[start:end], (str(end) if end < len(items) else None)


class FakePubSubService:
    """
    In-memory stand-in for the Pub/Sub REST API.

    Handles the topic, subscription, publish, pull, acknowledge and
    modifyAckDeadline calls the client makes. Every request is recorded in
    ``requests``.
    """

    def __init__(self):
        self.topics: dict[str, dict] = {}
        self.subscriptions: dict[str, dict] = {}
        self.requests: list[httpx.Request] = []
        self._ids = itertools.count(1)
        self._lock = threading.Lock()

    @property
    def last_request(self) -> httpx.Request:
        return self.requests[-1]

    def add_topic(self, name: str) -> str:
        path = f"projects/{PROJECT}/topics/{name}"
        self.topics[path] = {"name": path}
        return path

    def add_subscription(self, name: str, topic: str, ack_deadline_seconds: int = 10) -> str:
        path = f"projects/{PROJECT}/subscriptions/{name}"
        self.subscriptions[path] = {
            "resource": {
                "name": path,
                "topic": f"projects/{PROJECT}/topics/{topic}",
                "ackDeadlineSeconds": ack_deadline_seconds,
                "pushConfig": {},
            },
            "backlog": deque(),
            "outstanding": {},
        }
        return path

    def backlog(self, name: str) -> int:
        return len(self.subscriptions[f"projects/{PROJECT}/subscriptions/{name}"]["backlog"])

    def expire_deadlines(self) -> None:
        """Let every ack deadline lapse: unacknowledged messages go back to the backlog."""
        with self._lock:
            for sub in self.subscriptions.values():
                sub["backlog"].extendleft(reversed(list(sub["outstanding"].values())))
                sub["outstanding"].clear()

    def __call__(self, request: httpx.Request) -> httpx.Response:
        with self._lock:
            self.requests.append(request)
            return self._dispatch(request)

    def _dispatch(self, request: httpx.Request) -> httpx.Response:
        match = _ROUTE.match(request.url.path)
        if not match:
            return _error(404, "NOT_FOUND", f"Unknown path {request.url.path}")

        body = json.loads(request.content) if request.content else {}
        params = request.url.params
        kind, name, verb = match["kind"], match["name"], match["verb"]
        path = f"projects/{match['project']}/{kind}/{name}"

        if kind == "topics":
            if name is None:
                return self._list_topics(params)
            if match["nested"]:
                return self._list_topic_subscriptions(path, params)
            if verb == "publish":
                return self._publish(path, body)
            return self._topic_crud(request.method, path)

        if name is None:
            return self._list_subscriptions(params)
        if verb == "pull":
            return self._pull(path, body)
        if verb == "acknowledge":
            return self._acknowledge(path, body)
        if verb == "modifyAckDeadline":
            return self._modify_ack_deadline(path, body)
        return self._subscription_crud(request.method, path, body)

    def _topic_crud(self, method: str, path: str) -> httpx.Response:
        if method == "PUT":
            if path in self.topics:
                return _error(409, "ALREADY_EXISTS", "Topic already exists")
            self.topics[path] = {"name": path}
            return _ok(self.topics[path])
        if path not in self.topics:
            return _error(404, "NOT_FOUND", f"Topic not found (resource={path})")
        if method == "DELETE":
            del self.topics[path]
            for sub in self.subscriptions.values():
                if sub["resource"]["topic"] == path:
                    sub["resource"]["topic"] = "_deleted-topic_"
            return _ok({})
        return _ok(self.topics[path])

    def _list_topics(self, params) -> httpx.Response:
        page, token = _page(sorted(self.topics), params)
        payload: dict = {}
        if page:
            payload["topics"] = [self.topics[path] for path in page]
        if token:
            payload["nextPageToken"] = token
        return _ok(payload)

    def _list_topic_subscriptions(self, path: str, params) -> httpx.Response:
        if path not in self.topics:
            return _error(404, "NOT_FOUND", f"Topic not found (resource={path})")
        names = sorted(
            name for name, sub in self.subscriptions.items() if sub["resource"]["topic"] == path
        )
        page, token = _page(names, params)
        payload: dict = {}
        if page:
            payload["subscriptions"] = page
        if token:
            payload["nextPageToken"] = token
        return _ok(payload)

    def _publish(self, path: str, body: dict) -> httpx.Response:
        if path not in self.topics:
            return _error(404, "NOT_FOUND", f"Topic not found (resource={path})")
        messages = body.get("messages") or []
        if not messages or any(not m.get("data") and not m.get("attributes") for m in messages):
            return _error(400, "INVALID_ARGUMENT", "Invalid message")

        message_ids = []
        for message in messages:
            message_id = str(next(self._ids))
            stored = dict(message, messageId=message_id, publishTime="2026-10-18T12:00:00Z")
            for sub in self.subscriptions.values():
                if sub["resource"]["topic"] == path:
                    sub["backlog"].append(dict(stored))
            message_ids.append(message_id)
        return _ok({"messageIds": message_ids})

    def _subscription_crud(self, method: str, path: str, body: dict) -> httpx.Response:
        if method == "PUT":
            if body.get("topic") not in self.topics:
                return _error(404, "NOT_FOUND", "Topic not found")
            if path in self.subscriptions:
                return _error(409, "ALREADY_EXISTS", "Subscription already exists")
            resource = {
                "name": path,
                "topic": body["topic"],
                "ackDeadlineSeconds": body.get("ackDeadlineSeconds", 10),
                "pushConfig": body.get("pushConfig", {}),
            }
            self.subscriptions[path] = {"resource": resource, "backlog": deque(), "outstanding": {}}
            return _ok(resource)
        if path not in self.subscriptions:
            return _error(404, "NOT_FOUND", f"Subscription does not exist (resource={path})")
        if method == "DELETE":
            del self.subscriptions[path]
            return _ok({})
        return _ok(self.subscriptions[path]["resource"])

    def _list_subscriptions(self, params) -> httpx.Response:
        page, token = _page(sorted(self.subscriptions), params)
        payload: dict = {}
        if page:
            payload["subscriptions"] = [self.subscriptions[path]["resource"] for path in page]
        if token:
            payload["nextPageToken"] = token
        return _ok(payload)

    def _pull(self, path: str, body: dict) -> httpx.Response:
        sub = self.subscriptions.get(path)
        if sub is None:
            return _error(404, "NOT_FOUND", f"Subscription does not exist (resource={path})")
        received = []
        while sub["backlog"] and len(received) < body["maxMessages"]:
            message = sub["backlog"].popleft()
            ack_id = f"ack-{next(self._ids)}"
            sub["outstanding"][ack_id] = message
            received.append({"ackId": ack_id, "message": message})
        return _ok({"receivedMessages": received} if received else {})

    def _acknowledge(self, path: str, body: dict) -> httpx.Response:
        sub = self.subscriptions.get(path)
        if sub is None:
            return _error(404, "NOT_FOUND", f"Subscription does not exist (resource={path})")
        for ack_id in body["ackIds"]:
            sub["outstanding"].pop(ack_id, None)
        return _ok({})

    def _modify_ack_deadline(self, path: str, body: dict) -> httpx.Response:
        sub = self.subscriptions.get(path)
        if sub is None:
            return _error(404, "NOT_FOUND", f"Subscription does not exist (resource={path})")
        if body["ackDeadlineSeconds"] == 0:
            for ack_id in body["ackIds"]:
                message = sub["outstanding"].pop(ack_id, None)
                if message is not None:
                    sub["backlog"].appendleft(message)
        return _ok({})


@pytest.fixture
def service() -> FakePubSubService:
    """Provide a fresh in-memory Pub/Sub service."""
    return FakePubSubService()


@pytest.fixture
def config() -> ClientConfig:
    return ClientConfig(
        project_id=PROJECT,
        api_endpoint="http://pubsub.test",
        access_token="token-123",
        max_workers=4,
    )


@pytest.fixture
def http_client(service) -> httpx.Client:
    return httpx.Client(transport=httpx.MockTransport(service))


@pytest.fixture
def async_http_client(service) -> httpx.AsyncClient:
    return httpx.AsyncClient(transport=httpx.MockTransport(service))


@pytest.fixture
def pubsub(config, http_client) -> PubSub:
    """Provide a PubSub client wired to the in-memory service."""
    client = PubSub.from_config(config, client=http_client)
    yield client
    client.close()
