"""Fetching the search-results snapshot through the reader proxy."""
from __future__ import annotations

import logging
from typing import Optional
from urllib.parse import quote

import requests

from .config import FinderConfig

LOGGER = logging.getLogger(__name__)


class SnapshotFetchError(RuntimeError):
    """Raised when the upstream snapshot could not be obtained."""

    def __init__(self, message: str, status_code: Optional[int] = None) -> None:
        super().__init__(message)
        self.status_code = status_code


# Punctuation the reader proxy expects unescaped in the query.
_QUERY_SAFE = "!~*'()"


def build_search_endpoint(config: FinderConfig) -> str:
    return f"{config.reader_endpoint}?q={quote(config.search_query, safe=_QUERY_SAFE)}"


def fetch_snapshot(config: FinderConfig, session: Optional[requests.Session] = None) -> str:
    """Download the raw snapshot text; never retried."""

    url = build_search_endpoint(config)
    headers = {
        "User-Agent": config.user_agent,
        "Accept-Language": config.accept_language,
        "Cache-Control": "no-store",
    }
    client = session or requests
    LOGGER.info("Fetching travel snapshot for %r", config.search_query)
    try:
        response = client.get(url, headers=headers, timeout=config.request_timeout)
    except requests.RequestException as exc:
        raise SnapshotFetchError(f"Failed to fetch travel snapshot ({exc})") from exc

    if not response.ok:
        raise SnapshotFetchError(
            f"Failed to fetch travel snapshot ({response.status_code})",
            status_code=response.status_code,
        )
    return response.text
