"""Service interfaces + default adapters for app-level dependency injection."""

from __future__ import annotations

import time
from collections.abc import Callable
from dataclasses import dataclass
from typing import Protocol, runtime_checkable

import httpx

from search_viewer.models import Record, SearchResult, View
from search_viewer.services import search_service as _search
from search_viewer.services import session_service as _session


@runtime_checkable
class SessionService(Protocol):
    """Interface for the session collections (history, visited, favorites)."""

    async def append(
        self,
        *,
        client: httpx.AsyncClient | None,
        base_url: str,
        view: View,
        url: str,
        title: str | None,
    ) -> None:
        """Create one record in a view's collection."""
        ...

    async def remove(
        self,
        *,
        client: httpx.AsyncClient | None,
        base_url: str,
        url: str,
        view: View = View.FAVORITES,
    ) -> None:
        """Delete the record matching a URL."""
        ...

    async def list_records(
        self,
        *,
        client: httpx.AsyncClient | None,
        base_url: str,
        view: View,
    ) -> list[Record]:
        """Fetch a view's full collection."""
        ...


@runtime_checkable
class SearchService(Protocol):
    """Interface for the ranked search endpoint."""

    async def search(
        self,
        *,
        client: httpx.AsyncClient | None,
        base_url: str,
        encoded_query: str,
        now: Callable[[], float] = time.perf_counter,
    ) -> tuple[list[SearchResult], float]:
        """Run a search and return (results, elapsed_seconds)."""
        ...


class DefaultSessionService:
    """Default adapter that delegates to function-based session services."""

    async def append(
        self,
        *,
        client: httpx.AsyncClient | None,
        base_url: str,
        view: View,
        url: str,
        title: str | None,
    ) -> None:
        await _session.append_record(
            client=client,
            base_url=base_url,
            view=view,
            url=url,
            title=title,
        )

    async def remove(
        self,
        *,
        client: httpx.AsyncClient | None,
        base_url: str,
        url: str,
        view: View = View.FAVORITES,
    ) -> None:
        await _session.remove_record(client=client, base_url=base_url, url=url, view=view)

    async def list_records(
        self,
        *,
        client: httpx.AsyncClient | None,
        base_url: str,
        view: View,
    ) -> list[Record]:
        return await _session.list_records(client=client, base_url=base_url, view=view)


class DefaultSearchService:
    """Default adapter that delegates to the function-based search service."""

    async def search(
        self,
        *,
        client: httpx.AsyncClient | None,
        base_url: str,
        encoded_query: str,
        now: Callable[[], float] = time.perf_counter,
    ) -> tuple[list[SearchResult], float]:
        return await _search.fetch_search_results(
            client=client,
            base_url=base_url,
            encoded_query=encoded_query,
            now=now,
        )


@dataclass(slots=True)
class AppServices:
    """Aggregated service interfaces consumed by the app layer."""

    session: SessionService
    search: SearchService


def build_default_app_services() -> AppServices:
    """Build default app services backed by the function-based modules."""
    return AppServices(
        session=DefaultSessionService(),
        search=DefaultSearchService(),
    )


__all__ = [
    "AppServices",
    "DefaultSearchService",
    "DefaultSessionService",
    "SearchService",
    "SessionService",
    "build_default_app_services",
]
