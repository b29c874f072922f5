"""Ordered collection of committed filters.

The collection keeps filters in commit order and renders them into the
query parameters of the owning request. Its return hook decides what a
comparator call hands back to the caller.
"""

from __future__ import annotations

from typing import Any, Callable, Iterator

from core.constants import FILTER_QUERY_PARAM
from model.filter import Filter


class FilterCollection:
    """Ordered, identity-keyed set of committed filters."""

    def __init__(self, return_producer: Callable[[], Any] | None = None) -> None:
        """Create an empty collection.

        Args:
            return_producer: Zero-argument callable whose result is handed
                back after every commit. When omitted, the most recently
                committed filter is returned.
        """
        self._filters: list[Filter] = []
        self._return_producer = return_producer
        self._last_committed: Filter | None = None

    def on(self, property_name: str) -> Filter:
        """Start a new filter bound to this collection on ``property_name``."""
        return Filter(self).on(property_name)

    def add(self, filter_: Filter) -> None:
        """Insert a filter, keeping its original slot when re-added."""
        if not any(existing is filter_ for existing in self._filters):
            self._filters.append(filter_)
        self._last_committed = filter_

    def get_return(self) -> Any:
        """Return the value handed back to callers after a commit."""
        if self._return_producer is not None:
            return self._return_producer()
        return self._last_committed

    def compile(self) -> list[str]:
        """Render every committed filter as a query token."""
        return [filter_.get_query_param_format() for filter_ in self._filters]

    def to_query_params(self) -> list[tuple[str, str]]:
        """Return ``("filter", token)`` pairs for the transport."""
        return [(FILTER_QUERY_PARAM, token) for token in self.compile()]

    def clear(self) -> None:
        self._filters.clear()
        self._last_committed = None

    def __len__(self) -> int:
        return len(self._filters)

    def __iter__(self) -> Iterator[Filter]:
        return iter(list(self._filters))
