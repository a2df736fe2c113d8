"""
connection.py - HTTP client helpers
Single responsibility: build httpx clients with shared defaults.
"""

import logging

import httpx

from app.config import API_URL, HTTP_TIMEOUT_SECONDS

logger = logging.getLogger(__name__)


def get_client(
    base_url: str = API_URL,
    transport: httpx.AsyncBaseTransport | None = None,
) -> httpx.AsyncClient:
    """Open an async client against the review API."""
    logger.debug("Opening HTTP client for %s", base_url)
    return httpx.AsyncClient(
        base_url=base_url,
        timeout=HTTP_TIMEOUT_SECONDS,
        headers={"Accept": "application/json"},
        transport=transport,
    )
