"""Tests for service interface adapters and defaults."""

from __future__ import annotations

from unittest.mock import AsyncMock, patch

import pytest

from search_viewer.models import View
from search_viewer.services.interfaces import (
    AppServices,
    SearchService,
    SessionService,
    build_default_app_services,
)


def test_build_default_app_services_protocol_compatible() -> None:
    services = build_default_app_services()

    assert isinstance(services, AppServices)
    assert isinstance(services.session, SessionService)
    assert isinstance(services.search, SearchService)


@pytest.mark.asyncio
async def test_default_session_adapter_delegates(make_record) -> None:
    services = build_default_app_services()
    record = make_record()

    with (
        patch(
            "search_viewer.services.interfaces._session.append_record", new=AsyncMock()
        ) as append,
        patch(
            "search_viewer.services.interfaces._session.remove_record", new=AsyncMock()
        ) as remove,
        patch(
            "search_viewer.services.interfaces._session.list_records",
            new=AsyncMock(return_value=[record]),
        ) as list_mock,
    ):
        await services.session.append(
            client=None, base_url="http://s", view=View.VISITED, url="u", title="t"
        )
        await services.session.remove(client=None, base_url="http://s", url="u")
        records = await services.session.list_records(
            client=None, base_url="http://s", view=View.HISTORY
        )

    assert records == [record]
    append.assert_awaited_once_with(
        client=None, base_url="http://s", view=View.VISITED, url="u", title="t"
    )
    remove.assert_awaited_once_with(
        client=None, base_url="http://s", url="u", view=View.FAVORITES
    )
    list_mock.assert_awaited_once_with(client=None, base_url="http://s", view=View.HISTORY)


@pytest.mark.asyncio
async def test_default_search_adapter_delegates(make_result) -> None:
    services = build_default_app_services()

    def clock() -> float:
        return 0.0

    with patch(
        "search_viewer.services.interfaces._search.fetch_search_results",
        new=AsyncMock(return_value=([make_result()], 0.2)),
    ) as fetch:
        results, elapsed = await services.search.search(
            client=None, base_url="http://s", encoded_query="cats", now=clock
        )

    assert len(results) == 1
    assert elapsed == 0.2
    fetch.assert_awaited_once_with(
        client=None, base_url="http://s", encoded_query="cats", now=clock
    )
