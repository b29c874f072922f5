"""Unit tests for filtered collection reads."""

from __future__ import annotations

import asyncio

from model.resource_query import ResourceQuery


def test_comparator_call_resumes_query_chain(fake_api) -> None:
    """Comparator calls should return the owning query."""
    query = ResourceQuery(fake_api, "dataElements")

    assert query.filter().on("code").equals("ANC") is query


def test_list_sends_filters_in_order(fake_api) -> None:
    """list() should send one filter param per committed filter."""
    fake_api.respond("GET", "dataElements", {"dataElements": []})
    query = ResourceQuery(fake_api, "dataElements")

    payload = asyncio.run(
        query.filter().on("code").equals("ANC").filter().on("name").ilike("visit").list()
    )

    assert payload == {"dataElements": []}
    assert fake_api.calls == [
        ("GET", "dataElements", [("filter", "code:eq:ANC"), ("filter", "name:ilike:visit")])
    ]
