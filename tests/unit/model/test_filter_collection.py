"""Unit tests for the filter collection."""

from __future__ import annotations

import pytest

from core.errors import StrataIllegalStateError
from model.filter import Filter
from model.filter_collection import FilterCollection


def test_compile_keeps_commit_order() -> None:
    """Filters should render in the order they were committed."""
    filters = FilterCollection()
    filters.on("code").equals("ANC")
    filters.on("name").ilike("visit")

    assert filters.compile() == ["code:eq:ANC", "name:ilike:visit"]


def test_recommitting_filter_keeps_single_slot() -> None:
    """Re-adding the same filter should overwrite, not duplicate."""
    filters = FilterCollection()
    filter_ = filters.on("code")
    filter_.equals("A")
    filters.on("name").like("x")
    filter_.equals("B")

    assert filters.compile() == ["code:eq:B", "name:like:x"]


def test_return_producer_is_consulted_per_commit() -> None:
    """Configured producer should supply the chained return value."""
    calls: list[int] = []
    filters = FilterCollection(return_producer=lambda: calls.append(1) or "owner")

    result = Filter(filters).equals("x")

    assert result == "owner" and len(calls) == 1


def test_default_return_is_last_committed_filter() -> None:
    """Without a producer the committed filter comes back."""
    filters = FilterCollection()
    filter_ = Filter(filters)

    assert filter_.like("a") is filter_


def test_to_query_params_builds_filter_pairs() -> None:
    """Transport params should repeat the filter key per token."""
    filters = FilterCollection()
    filters.on("level").greater_or_equal("2")

    assert filters.to_query_params() == [("filter", "level:ge:2")]


def test_compile_fails_for_uncommitted_filter() -> None:
    """A filter added without a value cannot be rendered."""
    filters = FilterCollection()
    filters.add(Filter(filters))

    with pytest.raises(StrataIllegalStateError):
        filters.compile()


def test_clear_empties_collection() -> None:
    """clear() should drop every committed filter."""
    filters = FilterCollection()
    filters.on("code").equals("A")

    filters.clear()

    assert len(filters) == 0 and filters.get_return() is None


def test_iteration_yields_committed_filters() -> None:
    """Iterating should walk filters in commit order."""
    filters = FilterCollection()
    first = filters.on("code")
    first.equals("A")
    second = filters.on("name")
    second.like("b")

    assert list(filters) == [first, second]
