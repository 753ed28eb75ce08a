"""Search service helpers: query the ranking endpoint and time the round trip."""

from __future__ import annotations

import logging
import time
from collections.abc import Callable
from typing import Any

import httpx

from search_viewer.models import SearchResult

logger = logging.getLogger(__name__)

SEARCH_API_PATH = "/api/search"


def parse_search_payload(response: httpx.Response) -> list[SearchResult]:
    """Parse search results, keeping server (relevance) order."""
    if not response.content.strip():
        return []
    payload: Any = response.json()
    if not isinstance(payload, list):
        return []
    return [SearchResult.from_dict(item) for item in payload]


async def fetch_search_results(
    *,
    client: httpx.AsyncClient | None,
    base_url: str,
    encoded_query: str,
    now: Callable[[], float] = time.perf_counter,
) -> tuple[list[SearchResult], float]:
    """Run a search for an already percent-encoded query.

    Returns:
        Tuple of (results, elapsed_seconds) where elapsed is measured
        client-side around the request.
    """
    # The query is already encoded; passing it through params would encode it twice.
    url = f"{base_url}{SEARCH_API_PATH}?q={encoded_query}"
    start = now()
    if client is not None:
        response = await client.get(url)
    else:
        async with httpx.AsyncClient() as tmp_client:
            response = await tmp_client.get(url)
    end = now()

    response.raise_for_status()
    results = parse_search_payload(response)
    elapsed = end - start
    logger.debug("Search %r returned %d result(s) in %.3fs", encoded_query, len(results), elapsed)
    return results, elapsed


__all__ = [
    "SEARCH_API_PATH",
    "fetch_search_results",
    "parse_search_payload",
]
