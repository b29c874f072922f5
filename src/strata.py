"""Public SDK surface for Strata.

This module provides a stable import path for SDK users.
It re-exports the client, the filter DSL and the data store types.
"""

from __future__ import annotations

from api.client import StrataClient
from api.http_api import Api, HttpApi
from core.config import StrataConfig
from core.errors import (
    StrataApiError,
    StrataConfigError,
    StrataError,
    StrataIllegalStateError,
    StrataInvalidResponseError,
    StrataNoNamespacesError,
    StrataValidationError,
)
from datastore.base_store import BaseStore
from datastore.data_store import DataStore
from datastore.namespace import DataStoreNamespace
from model.filter import Filter
from model.filter_collection import FilterCollection
from model.query_token import Comparator, QueryToken
from model.resource_query import ResourceQuery

__all__ = [
    "Api",
    "BaseStore",
    "Comparator",
    "DataStore",
    "DataStoreNamespace",
    "Filter",
    "FilterCollection",
    "HttpApi",
    "QueryToken",
    "ResourceQuery",
    "StrataApiError",
    "StrataClient",
    "StrataConfig",
    "StrataConfigError",
    "StrataError",
    "StrataIllegalStateError",
    "StrataInvalidResponseError",
    "StrataNoNamespacesError",
    "StrataValidationError",
]
