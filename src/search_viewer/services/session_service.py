"""Session-store service helpers for appending, removing, and listing records."""

from __future__ import annotations

import logging
from typing import Any

import httpx

from search_viewer.models import NO_TITLE, Record, View

logger = logging.getLogger(__name__)

SESSION_API_PATH = "/api/session"


def build_session_body(url: str, title: str | None) -> str:
    """Build the plain-text body for a session append (``url`` newline ``title``)."""
    return f"{url}\n{title or NO_TITLE}"


def parse_session_payload(response: httpx.Response) -> list[Record]:
    """Parse a session listing; an empty, null, or non-list body is an empty list."""
    if not response.content.strip():
        return []
    payload: Any = response.json()
    if not isinstance(payload, list):
        return []
    return [Record.from_dict(item) for item in payload]


async def _send(
    client: httpx.AsyncClient | None,
    method: str,
    url: str,
    **kwargs: Any,
) -> httpx.Response:
    if client is not None:
        response = await client.request(method, url, **kwargs)
    else:
        async with httpx.AsyncClient() as tmp_client:
            response = await tmp_client.request(method, url, **kwargs)
    response.raise_for_status()
    return response


async def append_record(
    *,
    client: httpx.AsyncClient | None,
    base_url: str,
    view: View,
    url: str,
    title: str | None,
) -> None:
    """Create one record in ``view``; the server assigns its timestamp."""
    logger.debug("Appending %s to %s", url, view.value)
    await _send(
        client,
        "POST",
        f"{base_url}{SESSION_API_PATH}",
        params={"view": view.value},
        content=build_session_body(url, title).encode("utf-8"),
        headers={"Content-Type": "text/plain"},
    )


async def remove_record(
    *,
    client: httpx.AsyncClient | None,
    base_url: str,
    url: str,
    view: View = View.FAVORITES,
) -> None:
    """Delete the record matching ``url`` exactly within ``view``."""
    logger.debug("Removing %s from %s", url, view.value)
    await _send(
        client,
        "DELETE",
        f"{base_url}{SESSION_API_PATH}",
        params={"view": view.value, "url": url},
    )


async def list_records(
    *,
    client: httpx.AsyncClient | None,
    base_url: str,
    view: View,
) -> list[Record]:
    """Fetch the full collection for ``view`` in server order."""
    response = await _send(
        client,
        "GET",
        f"{base_url}{SESSION_API_PATH}",
        params={"view": view.value},
    )
    records = parse_session_payload(response)
    logger.debug("Listed %d record(s) from %s", len(records), view.value)
    return records


__all__ = [
    "SESSION_API_PATH",
    "append_record",
    "build_session_body",
    "list_records",
    "parse_session_payload",
    "remove_record",
]
