"""HTTP adapter for courier pub-sub protocols."""

from courier.adapters.http.publisher import AsyncHttpPublisher, HttpPublisher
from courier.adapters.http.subscriber import AsyncHttpSubscriber, HttpSubscriber
from courier.adapters.http.transport import AsyncHttpTransport, HttpTransport

__all__ = [
    "AsyncHttpPublisher",
    "AsyncHttpSubscriber",
    "AsyncHttpTransport",
    "HttpPublisher",
    "HttpSubscriber",
    "HttpTransport",
]
