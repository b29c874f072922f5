"""Unit tests for core config parsing."""

from __future__ import annotations

import pytest

from core.config import StrataConfig
from core.errors import StrataConfigError


def test_from_env_strips_trailing_slash(monkeypatch: pytest.MonkeyPatch) -> None:
    """Config should normalize the base URL."""
    monkeypatch.setenv("STRATA_BASE_URL", "https://play.example.org/api/")

    config = StrataConfig.from_env()

    assert config.base_url == "https://play.example.org/api"


def test_from_env_uses_default_timeout(monkeypatch: pytest.MonkeyPatch) -> None:
    """Timeout should fall back to the default."""
    monkeypatch.delenv("STRATA_TIMEOUT_SECONDS", raising=False)

    assert StrataConfig.from_env().timeout_seconds == 30.0


@pytest.mark.parametrize("raw_value", ["soon", "0", "-3"])
def test_from_env_raises_for_invalid_timeout(monkeypatch: pytest.MonkeyPatch, raw_value: str) -> None:
    """Config should fail for non-positive or non-numeric timeouts."""
    monkeypatch.setenv("STRATA_TIMEOUT_SECONDS", raw_value)

    with pytest.raises(StrataConfigError):
        StrataConfig.from_env()


def test_from_env_raises_for_non_http_url(monkeypatch: pytest.MonkeyPatch) -> None:
    """Config should reject URLs without an http(s) scheme."""
    monkeypatch.setenv("STRATA_BASE_URL", "play.example.org")

    with pytest.raises(StrataConfigError):
        StrataConfig.from_env()
