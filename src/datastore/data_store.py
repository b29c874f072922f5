"""Concrete data store.

Resolves namespaces against the ``dataStore`` endpoint. A namespace
only exists server-side once it holds a key, so a missing namespace
resolves to an empty accessor instead of an error.
"""

from __future__ import annotations

import threading
from typing import TYPE_CHECKING

from core.constants import DATA_STORE_END_POINT, HTTP_NOT_FOUND
from core.errors import StrataApiError, StrataInvalidResponseError
from core.logging_config import get_logger
from datastore.base_store import BaseStore
from datastore.namespace import DataStoreNamespace

if TYPE_CHECKING:
    from api.http_api import Api

_LOGGER = get_logger(__name__)

_SHARED_DATA_STORE: "DataStore | None" = None
_SHARED_DATA_STORE_LOCK = threading.Lock()


class DataStore(BaseStore):
    """Store for the public ``dataStore`` endpoint.

    Example:
        store = DataStore.get_data_store()
        namespace = await store.get("settings")
        value = await namespace.get("theme")
    """

    def __init__(self, api: "Api | None" = None) -> None:
        super().__init__(api, DATA_STORE_END_POINT)

    async def get(self, namespace: str, auto_load: bool = True) -> DataStoreNamespace:
        """Resolve a namespace accessor.

        Use ``auto_load=False`` when creating a namespace: the server
        answers 404 until the first key is written.

        Args:
            namespace: Namespace name.
            auto_load: Whether to fetch the namespace keys from the server.

        Returns:
            Accessor with server-confirmed keys, or an empty accessor when
            loading is skipped or the namespace does not exist yet.

        Raises:
            StrataInvalidResponseError: If the server does not return a key list.
            StrataApiError: If the read fails with anything but 404.
        """
        if not auto_load:
            return self._namespace(namespace)
        try:
            response = await self.api.get(self.namespace_path(namespace))
        except StrataApiError as error:
            if error.http_status_code == HTTP_NOT_FOUND:
                _LOGGER.info("datastore_namespace_missing", namespace=namespace)
                return self._namespace(namespace)
            raise
        if isinstance(response, list):
            return self._namespace(namespace, response)
        raise StrataInvalidResponseError("The requested namespace has no keys or does not exist.")

    def _namespace(self, namespace: str, keys: list[str] | None = None) -> DataStoreNamespace:
        return DataStoreNamespace(namespace, keys, api=self.api, end_point=self.end_point)

    @staticmethod
    def get_data_store() -> "DataStore":
        """Return the process-wide store, creating it on first call."""
        global _SHARED_DATA_STORE
        with _SHARED_DATA_STORE_LOCK:
            if _SHARED_DATA_STORE is None:
                _SHARED_DATA_STORE = DataStore()
            return _SHARED_DATA_STORE

    @staticmethod
    def reset_data_store() -> None:
        """Drop the process-wide store so the next call builds a new one."""
        global _SHARED_DATA_STORE
        with _SHARED_DATA_STORE_LOCK:
            _SHARED_DATA_STORE = None
