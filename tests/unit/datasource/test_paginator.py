"""Tests for continuation-token pagination."""

from unittest.mock import Mock

import pytest

from cloud_data_sources.datasource.paginator import ListRequest, Page, Paginator


class TransportError(Exception):
    pass


class TestPaginator:
    """Test Paginator.fetch_all behaviour."""

    def test_single_page_without_token(self, fake_list_operation):
        """A page with no continuation token ends the fetch."""
        operation = fake_list_operation([(["a", "b"], None)])

        result = Paginator(operation).fetch_all(ListRequest(params={"x": 1}))

        assert result == ["a", "b"]
        assert len(operation.requests) == 1
        assert operation.requests[0].page is None

    def test_collects_all_pages_in_order(self, fake_list_operation):
        """Output length equals the sum of page lengths, in first-seen order."""
        operation = fake_list_operation(
            [
                (["a", "b"], "T2"),
                (["c"], "T3"),
                ([], "T4"),
                (["d", "e", "f"], None),
            ]
        )

        result = Paginator(operation).fetch_all(ListRequest())

        assert result == ["a", "b", "c", "d", "e", "f"]
        assert len(operation.requests) == 4

    def test_forwards_tokens_on_request_copies(self, fake_list_operation):
        """Each follow-up request carries the previous page's token and the same template."""
        operation = fake_list_operation([(["a"], "T2"), (["b"], "T3"), (["c"], None)])
        request = ListRequest(params={"compartment_id": "c1"}, retry_policy="policy")

        Paginator(operation).fetch_all(request)

        assert [r.page for r in operation.requests] == [None, "T2", "T3"]
        assert all(r.params == {"compartment_id": "c1"} for r in operation.requests)
        assert all(r.retry_policy == "policy" for r in operation.requests)
        # the caller's template is left untouched
        assert request.page is None

    def test_does_not_deduplicate(self, fake_list_operation):
        """Records repeated across pages are kept."""
        operation = fake_list_operation([(["a"], "T2"), (["a"], None)])

        assert Paginator(operation).fetch_all(ListRequest()) == ["a", "a"]

    def test_error_on_later_page_propagates_unchanged(self, fake_list_operation):
        """A transport error on page 2 of 3 aborts the fetch with the same exception."""
        error = TransportError("connection reset")
        operation = fake_list_operation([(["a", "b"], "T2"), error, (["c"], None)])

        with pytest.raises(TransportError) as exc_info:
            Paginator(operation).fetch_all(ListRequest())

        assert exc_info.value is error
        assert len(operation.requests) == 2

    def test_error_on_first_page(self):
        """An error on the first call is raised without further calls."""
        operation = Mock(side_effect=TransportError("boom"))

        with pytest.raises(TransportError):
            Paginator(operation).fetch_all(ListRequest())

        operation.assert_called_once()

    def test_uses_injected_logger(self, fake_list_operation):
        """The injected logger receives page progress."""
        logger = Mock()
        operation = fake_list_operation([(["a"], "T2"), (["b"], None)])

        Paginator(operation, logger=logger).fetch_all(ListRequest())

        assert logger.debug.call_count == 3


class TestListRequest:
    """Test ListRequest helpers."""

    def test_with_page_returns_copy(self):
        request = ListRequest(params={"a": 1}, retry_policy="p")

        paged = request.with_page("T2")

        assert paged.page == "T2"
        assert paged.params == {"a": 1}
        assert paged.retry_policy == "p"
        assert request.page is None

    def test_page_defaults(self):
        page = Page(items=[1])

        assert page.next_page is None
