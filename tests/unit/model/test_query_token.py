"""Unit tests for query token rendering."""

from __future__ import annotations

import pytest

from core.errors import StrataValidationError
from model.query_token import Comparator, QueryToken


def test_to_query_param_joins_triple() -> None:
    """Token should render as property:comparator:value."""
    token = QueryToken("code", Comparator.EQUALS, "Partner_343")

    assert token.to_query_param() == "code:eq:Partner_343"


def test_value_may_contain_separator() -> None:
    """Values are emitted verbatim after the second separator."""
    token = QueryToken("lastUpdated", Comparator.GREATER_THAN, "2020-01-01T10:00")

    assert token.to_query_param() == "lastUpdated:gt:2020-01-01T10:00"


def test_rejects_empty_value() -> None:
    """Incomplete tokens cannot be built."""
    with pytest.raises(StrataValidationError):
        QueryToken("code", Comparator.LIKE, "")


def test_method_name_follows_member_name() -> None:
    """Comparator members expose their Filter method name."""
    assert Comparator.EQUALS.method_name == "equals"
    assert Comparator.NOT_ILIKE.method_name == "not_ilike"
