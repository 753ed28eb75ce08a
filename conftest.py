"""Shared test fixtures for search viewer tests."""

from __future__ import annotations

from types import SimpleNamespace
from typing import Any
from unittest.mock import AsyncMock

import pytest

from search_viewer.config import UserConfig
from search_viewer.models import Record, SearchResult
from search_viewer.services.interfaces import AppServices

# ── Factories ────────────────────────────────────────────────────────────────


@pytest.fixture
def make_record():
    """Factory fixture for creating Record instances with sensible defaults."""

    def _make(
        url: str = "https://example.com/page",
        title: str = "Example Page",
        timestamp: int = 1_700_000_000_000,
        is_favorite: bool = False,
    ) -> Record:
        return Record(url=url, title=title, timestamp=timestamp, is_favorite=is_favorite)

    return _make


@pytest.fixture
def make_result():
    """Factory fixture for creating SearchResult instances with sensible defaults."""

    def _make(
        where: str = "https://example.com/cats",
        title: str = "All About Cats",
        count: int = 3,
        score: float = 0.5,
        timestamp: int | None = 1_700_000_000_000,
        description: str = "",
    ) -> SearchResult:
        return SearchResult(
            where=where,
            title=title,
            count=count,
            score=score,
            timestamp=timestamp,
            description=description,
        )

    return _make


@pytest.fixture
def sample_config():
    """Factory fixture for creating UserConfig with optional overrides."""

    def _make(**kwargs: Any) -> UserConfig:
        kwargs.setdefault("open_in_browser", False)
        return UserConfig(**kwargs)

    return _make


@pytest.fixture
def fake_services():
    """App services backed by AsyncMocks; no HTTP traffic is produced."""

    def _make(
        records: list[Record] | None = None,
        results: list[SearchResult] | None = None,
        elapsed: float = 0.25,
    ) -> AppServices:
        session = SimpleNamespace(
            append=AsyncMock(return_value=None),
            remove=AsyncMock(return_value=None),
            list_records=AsyncMock(return_value=list(records or [])),
        )
        search = SimpleNamespace(
            search=AsyncMock(return_value=(list(results or []), elapsed)),
        )
        return AppServices(session=session, search=search)

    return _make
