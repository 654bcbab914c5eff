"""Lazy iteration over paginated API collections.

Pages are fetched on demand while iterating, following the JSON:API
``links.next`` URL, so ``first(10)`` only requests as many pages as it
needs. Stopping the iteration stops the fetching.

Example:
    for video in client.videos():
        print(video.id)

    recent = client.videos().first(10)
"""

import copy
from itertools import islice
from typing import Any, Generic, Iterator, Mapping, TypeVar, overload

from pug_client.core.logging import get_logger
from pug_client.infrastructure.http.connection import extract_data_array, next_page_url

logger = get_logger(__name__)

R = TypeVar("R")


class ResourceEnumerator(Generic[R]):
    """Iterable of resources backed by a paginated endpoint."""

    def __init__(
        self,
        client: Any,
        resource_class: type[R],
        base_url: str,
        params: Mapping[str, Any] | None = None,
        context: Mapping[str, Any] | None = None,
    ) -> None:
        """Initialize the enumerator.

        Args:
            client: API client providing ``get`` and ``per_page``.
            resource_class: Class with a ``from_api_data(client, data, **context)``
                constructor.
            base_url: Collection path.
            params: Query parameters (filters, ``page``) for the first request.
            context: Keyword arguments passed to every ``from_api_data`` call
                (e.g. ``namespace_id``).
        """
        self.client = client
        self.resource_class = resource_class
        self.base_url = base_url
        self.params = dict(params or {})
        self.context = dict(context or {})

    def __iter__(self) -> Iterator[R]:
        return self._fetch_pages()

    @overload
    def first(self) -> R | None: ...

    @overload
    def first(self, n: int) -> list[R]: ...

    def first(self, n: int | None = None) -> R | list[R] | None:
        """Return the first item, or a list of the first ``n`` items."""
        if n is None:
            return next(iter(self), None)
        return list(islice(self, n))

    def to_list(self) -> list[R]:
        """Fetch every page and return all items."""
        return list(self)

    def _first_page_params(self) -> dict[str, Any]:
        params = copy.deepcopy(self.params)
        page = dict(params.get("page") or {})
        page.setdefault("size", getattr(self.client, "per_page", None) or 10)
        params["page"] = page
        return params

    def _fetch_pages(self) -> Iterator[R]:
        url = self.base_url
        params: dict[str, Any] | None = self._first_page_params()
        page_number = 0

        while True:
            body = self.client.get(url, params)
            items = self._extract_items(body)
            page_number += 1
            logger.debug("Fetched page", url=url, page=page_number, items=len(items))
            if not items:
                return

            for item in items:
                yield self.resource_class.from_api_data(self.client, item, **self.context)

            next_url = next_page_url(body)
            if not next_url:
                return
            # The next link already carries the query string
            url, params = next_url, None

    @staticmethod
    def _extract_items(body: Any) -> list[Any]:
        if isinstance(body, Mapping) and isinstance(body.get("data"), Mapping):
            return [body["data"]]
        return extract_data_array(body)

    def __repr__(self) -> str:
        return f"<ResourceEnumerator {self.resource_class.__name__} {self.base_url!r}>"
