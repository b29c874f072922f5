"""Query token value type.

This module defines the comparator vocabulary and the immutable
``property:comparator:value`` triple sent as a filter parameter.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from core.constants import QUERY_TOKEN_SEPARATOR
from core.errors import StrataValidationError


class Comparator(str, Enum):
    """Comparator tokens keyed by their builder method name."""

    LIKE = "like"
    ILIKE = "ilike"
    EQUALS = "eq"
    NOT_EQUALS = "!eq"
    NOT_LIKE = "!like"
    NOT_ILIKE = "!ilike"
    GREATER_THAN = "gt"
    GREATER_OR_EQUAL = "ge"
    LESS_THAN = "lt"
    LESS_OR_EQUAL = "le"
    STARTS_WITH = "$like"
    ENDS_WITH = "like$"
    TOKEN = "token"

    @property
    def method_name(self) -> str:
        """Builder method name exposed on ``Filter``."""
        return self.name.lower()


@dataclass(frozen=True)
class QueryToken:
    """Completed filter triple.

    Attributes:
        property_name: Property the filter applies to.
        comparator: Comparator token.
        filter_value: Value compared against.
    """

    property_name: str
    comparator: Comparator
    filter_value: str

    def __post_init__(self) -> None:
        if not self.property_name:
            raise StrataValidationError("Property name to filter on should be provided")
        if not self.filter_value:
            raise StrataValidationError("filterValue should be provided")

    def to_query_param(self) -> str:
        """Render the token in ``property:comparator:value`` form."""
        return QUERY_TOKEN_SEPARATOR.join(
            (self.property_name, self.comparator.value, self.filter_value)
        )
