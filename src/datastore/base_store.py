"""Abstract namespace store.

This module holds the transport-facing operations shared by every
concrete store. Namespace resolution is left to subclasses.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from core.constants import DATA_STORE_END_POINT
from core.errors import StrataNoNamespacesError
from core.logging_config import get_logger

if TYPE_CHECKING:
    from api.http_api import Api
    from datastore.namespace import DataStoreNamespace

_LOGGER = get_logger(__name__)


class BaseStore:
    """Store that hands out namespace accessors."""

    def __init__(self, api: "Api | None" = None, end_point: str = DATA_STORE_END_POINT) -> None:
        """Create store.

        Args:
            api: Transport capability; defaults to the shared ``HttpApi``.
            end_point: Store endpoint relative to the API root.
        """
        if api is None:
            from api.http_api import HttpApi

            api = HttpApi.get_api()
        self.api = api
        self.end_point = end_point

    async def get(self, namespace: str, auto_load: bool = True) -> "DataStoreNamespace":
        """Resolve a namespace accessor.

        Args:
            namespace: Namespace name.
            auto_load: Whether to fetch the namespace keys from the server.

        Raises:
            NotImplementedError: Always; concrete stores must override.
        """
        raise NotImplementedError("Must be implemented by subclass.")

    async def get_all(self) -> list[Any]:
        """List every namespace on the server.

        Returns:
            Namespace descriptors as returned by the server.

        Raises:
            StrataNoNamespacesError: If the server returns no list.
            StrataApiError: If the transport call fails.
        """
        response = await self.api.get(self.end_point)
        if isinstance(response, list):
            return response
        raise StrataNoNamespacesError("No namespaces exist.")

    async def delete(self, namespace: str) -> Any:
        """Delete a namespace with all its keys.

        Args:
            namespace: Namespace to delete.

        Returns:
            Response body from the transport.
        """
        _LOGGER.info("datastore_namespace_delete", end_point=self.end_point, namespace=namespace)
        return await self.api.delete(self.namespace_path(namespace))

    def namespace_path(self, namespace: str) -> str:
        return "/".join((self.end_point, namespace))
