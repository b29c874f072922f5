"""Filtered reads against a collection resource.

A ``ResourceQuery`` owns a filter collection whose return hook is the
query itself, so comparator calls resume the request chain:
``await query.filter().on("code").equals("ANC").list()``.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from core.logging_config import get_logger
from model.filter import Filter
from model.filter_collection import FilterCollection

if TYPE_CHECKING:
    from api.http_api import Api

_LOGGER = get_logger(__name__)


class ResourceQuery:
    """Request builder for one collection endpoint."""

    def __init__(self, api: "Api", end_point: str) -> None:
        self.api = api
        self.end_point = end_point
        self.filters = FilterCollection(return_producer=lambda: self)

    def filter(self) -> Filter:
        """Start a new filter whose comparator call returns this query."""
        return Filter(self.filters)

    async def list(self) -> Any:
        """Read the collection with every committed filter applied.

        Returns:
            Decoded response payload.

        Raises:
            StrataIllegalStateError: If a staged filter was never completed.
            StrataApiError: If the transport call fails.
        """
        params = self.filters.to_query_params()
        _LOGGER.debug("resource_query_list", end_point=self.end_point, filters=len(params))
        return await self.api.get(self.end_point, params=params)
