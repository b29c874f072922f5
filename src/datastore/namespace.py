"""Namespace accessor.

A ``DataStoreNamespace`` wraps one server-side namespace and the key
names known for it. Whether the key list was confirmed by the server
is tracked explicitly by ``keys_loaded``.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Sequence

from core.constants import DATA_STORE_END_POINT, META_DATA_PATH_SEGMENT
from core.errors import StrataInvalidResponseError, StrataValidationError
from core.logging_config import get_logger

if TYPE_CHECKING:
    from api.http_api import Api

_LOGGER = get_logger(__name__)


class DataStoreNamespace:
    """Key/value access to a single namespace."""

    def __init__(
        self,
        namespace: str,
        keys: Sequence[str] | None = None,
        api: "Api | None" = None,
        end_point: str = DATA_STORE_END_POINT,
    ) -> None:
        """Create accessor.

        Args:
            namespace: Namespace name.
            keys: Server-confirmed key names; omit when unknown.
            api: Transport capability; defaults to the shared ``HttpApi``.
            end_point: Store endpoint the namespace lives under.

        Raises:
            StrataValidationError: If no namespace name is given.
        """
        if not namespace:
            raise StrataValidationError("Namespace name should be provided")
        if api is None:
            from api.http_api import HttpApi

            api = HttpApi.get_api()
        self.namespace = namespace
        self.api = api
        self.end_point = end_point
        self.keys_loaded = keys is not None
        self._keys: list[str] = list(keys) if keys is not None else []

    @property
    def keys(self) -> list[str]:
        """Key names known locally, in server order."""
        return list(self._keys)

    async def get_keys(self, force_load: bool = False) -> list[str]:
        """Return key names, fetching them unless already confirmed.

        Args:
            force_load: Refetch even when keys were already loaded.

        Returns:
            Key names of the namespace.

        Raises:
            StrataInvalidResponseError: If the server does not return a list.
            StrataApiError: If the transport call fails.
        """
        if self.keys_loaded and not force_load:
            return self.keys
        response = await self.api.get(self._path())
        if not isinstance(response, list):
            raise StrataInvalidResponseError(
                f"Expected a key list for namespace '{self.namespace}', "
                f"got {type(response).__name__}."
            )
        self._keys = list(response)
        self.keys_loaded = True
        return self.keys

    async def get(self, key: str) -> Any:
        """Read the value stored under ``key``."""
        return await self.api.get(self._path(key))

    async def get_meta_data(self, key: str) -> Any:
        """Read ownership and timestamp metadata for ``key``."""
        return await self.api.get(self._path(key, META_DATA_PATH_SEGMENT))

    async def set(self, key: str, value: Any, override_existing: bool = False) -> Any:
        """Create a key, or overwrite it when ``override_existing`` is set.

        Args:
            key: Key name.
            value: JSON-serializable value.
            override_existing: Allow replacing a key already known locally.

        Returns:
            Response body from the transport.

        Raises:
            StrataValidationError: If the key exists and overriding is off.
        """
        if key in self._keys:
            if not override_existing:
                raise StrataValidationError(
                    f"Key '{key}' already exists in namespace '{self.namespace}'. "
                    "Use update() or pass override_existing=True."
                )
            return await self.update(key, value)
        response = await self.api.post(self._path(key), value)
        self._keys.append(key)
        _LOGGER.info("datastore_key_created", namespace=self.namespace, key=key)
        return response

    async def update(self, key: str, value: Any) -> Any:
        """Replace the value stored under ``key``."""
        response = await self.api.put(self._path(key), value)
        if key not in self._keys:
            self._keys.append(key)
        return response

    async def delete(self, key: str) -> Any:
        """Delete ``key`` from the namespace."""
        response = await self.api.delete(self._path(key))
        if key in self._keys:
            self._keys.remove(key)
        _LOGGER.info("datastore_key_deleted", namespace=self.namespace, key=key)
        return response

    def _path(self, *segments: str) -> str:
        for segment in segments:
            if not segment:
                raise StrataValidationError("Key should be provided")
        return "/".join((self.end_point, self.namespace, *segments))

    def __repr__(self) -> str:
        return (
            f"DataStoreNamespace(namespace={self.namespace!r}, "
            f"keys={self._keys!r}, keys_loaded={self.keys_loaded})"
        )
