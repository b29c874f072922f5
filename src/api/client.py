"""Python SDK entry point.

This module wires one transport into the data store and resource
queries so callers share configuration and connection settings.
"""

from __future__ import annotations

from core.config import StrataConfig
from datastore.data_store import DataStore
from model.resource_query import ResourceQuery
from api.http_api import Api, HttpApi


class StrataClient:
    """Primary SDK entry point."""

    def __init__(self, config: StrataConfig | None = None, api: Api | None = None) -> None:
        """Create SDK client.

        Args:
            config: Optional runtime configuration, used when ``api`` is omitted.
            api: Optional transport capability.
        """
        self.api: Api = api or HttpApi(config or StrataConfig.from_env())
        self.data_store = DataStore(self.api)

    def resource(self, end_point: str) -> ResourceQuery:
        """Start a filtered read against a collection endpoint.

        Args:
            end_point: Collection path, for example ``dataElements``.

        Returns:
            New query with no filters.
        """
        return ResourceQuery(self.api, end_point)
