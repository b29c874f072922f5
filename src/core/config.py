"""Runtime configuration model for Strata.

This module owns all environment variable parsing and validation.
Other modules consume a typed config object instead of raw env reads.
"""

from __future__ import annotations

from dataclasses import dataclass
import os

from core.constants import DEFAULT_BASE_URL, DEFAULT_TIMEOUT_SECONDS
from core.errors import StrataConfigError


@dataclass(frozen=True)
class StrataConfig:
    """Validated runtime configuration.

    Attributes:
        base_url: Root URL of the remote API, without trailing slash.
        timeout_seconds: Per-request transport timeout.
    """

    base_url: str
    timeout_seconds: float

    @classmethod
    def from_env(cls) -> "StrataConfig":
        """Build config from process environment variables.

        Returns:
            A validated config object.

        Raises:
            StrataConfigError: If environment values are invalid.
        """
        base_url = os.getenv("STRATA_BASE_URL", DEFAULT_BASE_URL)
        timeout_value = os.getenv("STRATA_TIMEOUT_SECONDS", str(DEFAULT_TIMEOUT_SECONDS))
        return cls(
            base_url=parse_base_url(base_url),
            timeout_seconds=_parse_timeout(timeout_value),
        )


def parse_base_url(raw_value: str, source: str = "STRATA_BASE_URL") -> str:
    """Normalize a base URL setting.

    Args:
        raw_value: Raw URL string.
        source: Setting name used in the error message.

    Returns:
        Base URL without trailing slash.

    Raises:
        StrataConfigError: If value is not an http(s) URL.
    """
    value = raw_value.strip().rstrip("/")
    if not value.startswith(("http://", "https://")):
        raise StrataConfigError(
            f"Invalid {source} value: "
            f"expected an http(s) URL, got '{raw_value}'. "
            f"Set {source} to the API root, for example https://play.example.org/api."
        )
    return value


def _parse_timeout(raw_value: str) -> float:
    """Parse the request timeout environment value.

    Args:
        raw_value: Raw string from environment.

    Returns:
        Parsed positive timeout in seconds.

    Raises:
        StrataConfigError: If value is not a positive number.
    """
    try:
        timeout = float(raw_value)
    except ValueError as error:
        raise StrataConfigError(
            "Invalid STRATA_TIMEOUT_SECONDS value: "
            f"expected number, got '{raw_value}'. "
            "Set STRATA_TIMEOUT_SECONDS to a numeric value."
        ) from error
    if timeout <= 0:
        raise StrataConfigError(
            f"Invalid STRATA_TIMEOUT_SECONDS value: expected a positive number, got {timeout}."
        )
    return timeout
