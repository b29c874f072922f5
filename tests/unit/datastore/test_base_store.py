"""Unit tests for the abstract store."""

from __future__ import annotations

import asyncio

import pytest

from api.http_api import HttpApi
from datastore.base_store import BaseStore


def test_get_must_be_overridden(fake_api) -> None:
    """The abstract store cannot resolve namespaces."""
    with pytest.raises(NotImplementedError):
        asyncio.run(BaseStore(fake_api).get("ns"))


def test_custom_end_point_is_used(fake_api) -> None:
    """Stores should address their own endpoint."""
    fake_api.respond("GET", "userDataStore", ["prefs"])
    store = BaseStore(fake_api, end_point="userDataStore")

    namespaces = asyncio.run(store.get_all())
    asyncio.run(store.delete("prefs"))

    assert namespaces == ["prefs"]
    assert fake_api.calls[-1] == ("DELETE", "userDataStore/prefs", None)


def test_defaults_to_shared_transport() -> None:
    """Stores built without a transport share the process-wide one."""
    store = BaseStore()

    assert store.api is HttpApi.get_api() and store.end_point == "dataStore"
