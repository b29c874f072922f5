"""Core constants used across Strata modules.

This module centralizes defaults and wire-format literals.
Keeping values here avoids magic literals in business logic.
"""

from __future__ import annotations

DEFAULT_BASE_URL = "http://localhost:8080/api"
DEFAULT_TIMEOUT_SECONDS = 30.0
DATA_STORE_END_POINT = "dataStore"
META_DATA_PATH_SEGMENT = "metaData"
FILTER_QUERY_PARAM = "filter"
QUERY_TOKEN_SEPARATOR = ":"
DEFAULT_FILTER_PROPERTY = "name"
HTTP_NOT_FOUND = 404
