"""Chainable filter builder.

A ``Filter`` stages one query token. ``on`` selects the property and
returns the filter itself; a comparator method finalizes the token,
commits the filter into its owning collection and hands back whatever
the collection's return hook yields.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from core.constants import DEFAULT_FILTER_PROPERTY
from core.errors import StrataIllegalStateError, StrataValidationError
from model.query_token import Comparator, QueryToken

if TYPE_CHECKING:
    from model.filter_collection import FilterCollection


class Filter:
    """Mutable builder for a single query token."""

    def __init__(self, collection: "FilterCollection") -> None:
        self._collection = collection
        self.property_name = DEFAULT_FILTER_PROPERTY
        self.comparator = Comparator.LIKE.value
        self.filter_value: str | None = None

    @property
    def collection(self) -> "FilterCollection":
        """Collection this filter commits into."""
        return self._collection

    def on(self, property_name: str | None) -> "Filter":
        """Select the property to filter on.

        Args:
            property_name: Property name, for example ``code``.

        Returns:
            This filter, for chaining a comparator call.

        Raises:
            StrataValidationError: If no property name is given.
        """
        if not property_name:
            raise StrataValidationError("Property name to filter on should be provided")
        self.property_name = property_name
        return self

    def like(self, filter_value: str | None) -> Any:
        """Commit a case-sensitive ``like`` comparison."""
        return self._commit(Comparator.LIKE, filter_value)

    def ilike(self, filter_value: str | None) -> Any:
        """Commit a case-insensitive ``ilike`` comparison."""
        return self._commit(Comparator.ILIKE, filter_value)

    def equals(self, filter_value: str | None) -> Any:
        """Commit an ``eq`` comparison."""
        return self._commit(Comparator.EQUALS, filter_value)

    def not_equals(self, filter_value: str | None) -> Any:
        return self._commit(Comparator.NOT_EQUALS, filter_value)

    def not_like(self, filter_value: str | None) -> Any:
        return self._commit(Comparator.NOT_LIKE, filter_value)

    def not_ilike(self, filter_value: str | None) -> Any:
        return self._commit(Comparator.NOT_ILIKE, filter_value)

    def greater_than(self, filter_value: str | None) -> Any:
        return self._commit(Comparator.GREATER_THAN, filter_value)

    def greater_or_equal(self, filter_value: str | None) -> Any:
        return self._commit(Comparator.GREATER_OR_EQUAL, filter_value)

    def less_than(self, filter_value: str | None) -> Any:
        return self._commit(Comparator.LESS_THAN, filter_value)

    def less_or_equal(self, filter_value: str | None) -> Any:
        return self._commit(Comparator.LESS_OR_EQUAL, filter_value)

    def starts_with(self, filter_value: str | None) -> Any:
        return self._commit(Comparator.STARTS_WITH, filter_value)

    def ends_with(self, filter_value: str | None) -> Any:
        return self._commit(Comparator.ENDS_WITH, filter_value)

    def token(self, filter_value: str | None) -> Any:
        """Commit a full-text ``token`` match."""
        return self._commit(Comparator.TOKEN, filter_value)

    def to_query_token(self) -> QueryToken:
        """Return the finalized token.

        Raises:
            StrataIllegalStateError: If no comparator method has run yet.
        """
        if self.filter_value is None:
            raise StrataIllegalStateError(
                f"Filter on '{self.property_name}' has no value; "
                "call a comparator method such as equals() before rendering it."
            )
        return QueryToken(self.property_name, Comparator(self.comparator), self.filter_value)

    def get_query_param_format(self) -> str:
        """Render the filter as ``property:comparator:value``."""
        return self.to_query_token().to_query_param()

    def _commit(self, comparator: Comparator, filter_value: str | None) -> Any:
        if not filter_value:
            raise StrataValidationError("filterValue should be provided")
        self.comparator = comparator.value
        self.filter_value = filter_value
        self._collection.add(self)
        return self._collection.get_return()

    @staticmethod
    def get_filter() -> "Filter":
        """Create a filter bound to a fresh collection."""
        from model.filter_collection import FilterCollection

        return Filter(FilterCollection())

    def __repr__(self) -> str:
        return (
            f"Filter(property_name={self.property_name!r}, "
            f"comparator={self.comparator!r}, filter_value={self.filter_value!r})"
        )
