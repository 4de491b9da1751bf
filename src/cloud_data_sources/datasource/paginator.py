"""Continuation-token pagination over vendor list operations."""

from dataclasses import dataclass, field, replace
from typing import Any, Callable, Optional

from cloud_data_sources.helpers.logger import get_logger


@dataclass(frozen=True)
class ListRequest:
    """
    Request template for a list operation.

    ``params`` holds the search parameters, ``retry_policy`` is handed to the
    SDK untouched and ``page`` is the continuation token of the page to fetch.
    """

    params: dict[str, Any] = field(default_factory=dict)
    retry_policy: Any = None
    page: Optional[str] = None

    def with_page(self, page: Optional[str]) -> "ListRequest":
        return replace(self, page=page)


@dataclass(frozen=True)
class Page:
    """One batch of raw records and the token of the next page, if any."""

    items: list[Any]
    next_page: Optional[str] = None


ListOperation = Callable[[ListRequest], Page]


class Paginator:
    """Fetch every page of a list operation, one page after the other."""

    def __init__(self, list_operation: ListOperation, logger=None) -> None:
        """
        Args:
            list_operation: Callable issuing one list request and returning its Page
            logger: Optional logger, defaults to the module logger
        """
        self._list_operation = list_operation
        self._logger = logger or get_logger(__name__)

    def fetch_all(self, request: ListRequest) -> list[Any]:
        """
        Collect the items of all pages in first-seen order.

        Errors raised by the list operation propagate unchanged and nothing
        accumulated so far is returned.

        Args:
            request: Request template for the first page

        Returns:
            Combined items from all pages
        """
        operation_name = getattr(self._list_operation, "__name__", "list_operation")
        combined_results: list[Any] = []
        page_count = 0

        while True:
            page = self._list_operation(request)
            page_count += 1
            combined_results.extend(page.items)
            self._logger.debug(
                "%s page %d returned %d items (more pages: %s)",
                operation_name,
                page_count,
                len(page.items),
                page.next_page is not None,
            )

            if page.next_page is None:
                break
            request = request.with_page(page.next_page)

        self._logger.debug(
            "%s collected %d items from %d pages",
            operation_name,
            len(combined_results),
            page_count,
        )
        return combined_results
