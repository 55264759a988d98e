"""Paginated listing support."""

from collections.abc import Callable, Iterator
from dataclasses import dataclass
from typing import Any, Optional, TypeVar

T = TypeVar("T")


@dataclass(frozen=True)
class ListQuery:
    """
    One page request of a list call.

    ``max_results`` bounds the page size; ``page_token`` resumes a previous
    listing. A list call hands back a new ListQuery carrying the same bound
    and the service's continuation token while more results remain.
    """

    max_results: Optional[int] = None
    page_token: Optional[str] = None

    def params(self) -> dict[str, Any]:
        return {"pageSize": self.max_results, "pageToken": self.page_token}

    def next_page(self, next_page_token: Optional[str]) -> Optional["ListQuery"]:
        if not next_page_token:
            return None
        return ListQuery(max_results=self.max_results, page_token=next_page_token)


def resolve_query(
    query: Optional[ListQuery], max_results: Optional[int], page_token: Optional[str]
) -> ListQuery:
    if query is not None:
        if max_results is not None or page_token is not None:
            raise TypeError("Pass either a ListQuery or max_results/page_token, not both")
        return query
    return ListQuery(max_results=max_results, page_token=page_token)


def iter_pages(
    fetch: Callable[[ListQuery], tuple[list[T], Optional[ListQuery]]],
    query: ListQuery,
) -> Iterator[T]:
    """Yield items from every page, following continuation queries."""
    next_query: Optional[ListQuery] = query
    while next_query is not None:
        items, next_query = fetch(next_query)
        yield from items
