"""Strata exception hierarchy.

This module defines traceable domain errors with clear boundaries.
Each layer raises a specific error type so callers can match on it.
"""

from __future__ import annotations


class StrataError(Exception):
    """Base exception for all Strata failures."""


class StrataConfigError(StrataError):
    """Raised for invalid runtime configuration."""


class StrataValidationError(StrataError):
    """Raised when a caller omits a required argument."""


class StrataIllegalStateError(StrataError):
    """Raised when an object is used before it is ready."""


class StrataInvalidResponseError(StrataError):
    """Raised when a server payload violates the expected shape."""


class StrataNoNamespacesError(StrataError):
    """Raised when the server reports no usable namespace list."""


class StrataApiError(StrataError):
    """Raised for failed transport calls.

    Attributes:
        http_status_code: HTTP status of the failed response, or None when
            the request never produced a response.
        url: Requested URL.
        payload: Decoded error body, when the server sent one.
    """

    def __init__(
        self,
        message: str,
        http_status_code: int | None = None,
        url: str | None = None,
        payload: object = None,
    ) -> None:
        super().__init__(message)
        self.http_status_code = http_status_code
        self.url = url
        self.payload = payload
