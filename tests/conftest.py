"""Pytest configuration for repository test runs."""

from __future__ import annotations

import sys
from pathlib import Path
from typing import Any

import pytest


def pytest_sessionstart() -> None:
    """Add src directory to sys.path for test imports."""
    project_root = Path(__file__).resolve().parent.parent
    src_path = project_root / "src"
    if str(src_path) not in sys.path:
        sys.path.insert(0, str(src_path))


class FakeApi:
    """In-memory transport recording every call.

    Responses are looked up by ``(method, path)``; exception instances
    are raised instead of returned.
    """

    def __init__(self) -> None:
        self.calls: list[tuple[str, str, Any]] = []
        self.responses: dict[tuple[str, str], Any] = {}

    def respond(self, method: str, path: str, value: Any) -> None:
        self.responses[(method, path)] = value

    async def get(self, path: str, params: Any = None) -> Any:
        return self._answer("GET", path, params)

    async def post(self, path: str, data: Any) -> Any:
        return self._answer("POST", path, data)

    async def put(self, path: str, data: Any) -> Any:
        return self._answer("PUT", path, data)

    async def delete(self, path: str) -> Any:
        return self._answer("DELETE", path, None)

    def _answer(self, method: str, path: str, argument: Any) -> Any:
        self.calls.append((method, path, argument))
        value = self.responses.get((method, path))
        if isinstance(value, BaseException):
            raise value
        return value


@pytest.fixture
def fake_api() -> FakeApi:
    """Fresh recording transport."""
    return FakeApi()


@pytest.fixture(autouse=True)
def _isolate_shared_instances(monkeypatch: pytest.MonkeyPatch):
    """Keep process-wide singletons from leaking between tests."""
    monkeypatch.setenv("STRATA_BASE_URL", "http://strata.test/api")
    from api.http_api import HttpApi
    from datastore.data_store import DataStore

    HttpApi.set_api(None)
    DataStore.reset_data_store()
    yield
    HttpApi.set_api(None)
    DataStore.reset_data_store()
