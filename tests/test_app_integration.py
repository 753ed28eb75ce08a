"""End-to-end tests for SearchViewer driven through Textual's pilot."""

from __future__ import annotations

import asyncio

import httpx
import pytest
from textual.widgets import Button, Input, Label, RadioButton, Static

from search_viewer.app import SearchViewer
from search_viewer.modals import AlertModal, ViewOptionsModal
from search_viewer.models import View
from search_viewer.rendering import FAVORITED_LABEL
from search_viewer.widgets import RecordItem, ResultsPane

SERVER = "http://localhost:8080"


async def _settle(app: SearchViewer, pilot) -> None:
    """Wait until navigation and action tasks have finished."""
    for _ in range(10):
        pending = [task for task in app._background_tasks if not task.done()]
        if pending:
            await asyncio.gather(*pending, return_exceptions=True)
        await pilot.pause()
        if not any(not task.done() for task in app._background_tasks):
            return


def _pane(app: SearchViewer) -> ResultsPane:
    return app.screen_stack[0].query_one(ResultsPane)


def _items(app: SearchViewer) -> list[RecordItem]:
    return list(_pane(app).query(RecordItem))


@pytest.mark.asyncio
async def test_search_location_renders_results_and_records_history(
    fake_services, sample_config, make_result
) -> None:
    services = fake_services(
        results=[make_result(where="https://a.test"), make_result(where="https://b.test")],
        elapsed=0.25,
    )
    app = SearchViewer("/?q=cats", config=sample_config(server_url=SERVER), services=services)

    async with app.run_test() as pilot:
        await _settle(app, pilot)

        assert [item.model.url for item in _items(app)] == ["https://a.test", "https://b.test"]
        stats = app.query_one("#execution-stats", Label)
        assert str(stats.content) == "2 results in about 0.25s"
        assert app.query_one("#search-input", Input).value == "cats"
        assert app.active_view is View.SEARCH

    services.search.search.assert_awaited_once()
    assert services.search.search.await_args.kwargs["encoded_query"] == "cats"
    services.session.append.assert_awaited_once()
    kwargs = services.session.append.await_args.kwargs
    assert kwargs["view"] is View.HISTORY
    assert (kwargs["url"], kwargs["title"]) == (f"{SERVER}?q=cats", "cats")


@pytest.mark.asyncio
async def test_empty_favorites_view(fake_services, sample_config) -> None:
    services = fake_services(records=[])
    app = SearchViewer("/?view=favorites", config=sample_config(), services=services)

    async with app.run_test() as pilot:
        await _settle(app, pilot)

        pane = _pane(app)
        assert str(pane.query_one(".results-header", Label).content) == "⭐ Favorites"
        assert str(pane.query_one(".empty-state", Static).content) == "No favorites..."
        assert str(app.query_one("#execution-stats", Label).content) == ""

    services.search.search.assert_not_awaited()
    services.session.list_records.assert_awaited_once()


@pytest.mark.asyncio
async def test_unknown_view_renders_nothing(fake_services, sample_config) -> None:
    services = fake_services()
    app = SearchViewer("/?view=bogus", config=sample_config(), services=services)

    async with app.run_test() as pilot:
        await _settle(app, pilot)
        assert len(_pane(app).children) == 0
        assert app.active_view is None

    services.search.search.assert_not_awaited()
    services.session.list_records.assert_not_awaited()


@pytest.mark.asyncio
async def test_remove_favorite_removes_only_that_item(
    fake_services, sample_config, make_record
) -> None:
    records = [
        make_record(url="https://old.test", timestamp=1),
        make_record(url="https://new.test", timestamp=2),
    ]
    services = fake_services(records=records)
    app = SearchViewer("/?view=favorites", config=sample_config(), services=services)

    async with app.run_test() as pilot:
        await _settle(app, pilot)
        assert [item.model.url for item in _items(app)] == ["https://new.test", "https://old.test"]

        app.query_one("#record-0 .record-action", Button).press()
        await pilot.pause()
        await _settle(app, pilot)

        assert [item.model.url for item in _items(app)] == ["https://old.test"]

    services.session.remove.assert_awaited_once()
    assert services.session.remove.await_args.kwargs["url"] == "https://new.test"
    services.session.list_records.assert_awaited_once()


@pytest.mark.asyncio
async def test_favorite_toggle_disables_after_success(
    fake_services, sample_config, make_record
) -> None:
    services = fake_services(records=[make_record(url="https://a.test", title="A")])
    app = SearchViewer("/?view=history", config=sample_config(), services=services)

    async with app.run_test() as pilot:
        await _settle(app, pilot)
        button = app.query_one("#record-0 .record-action", Button)
        button.press()
        await pilot.pause()
        await _settle(app, pilot)

        button = app.query_one("#record-0 .record-action", Button)
        assert button.disabled is True
        assert str(button.label) == FAVORITED_LABEL

    services.session.append.assert_awaited_once()
    kwargs = services.session.append.await_args.kwargs
    assert kwargs["view"] is View.FAVORITES
    assert (kwargs["url"], kwargs["title"]) == ("https://a.test", "A")


@pytest.mark.asyncio
async def test_failed_listing_shows_alert(fake_services, sample_config) -> None:
    services = fake_services()
    services.session.list_records.side_effect = httpx.ConnectError("connection refused")
    app = SearchViewer("/?view=visited", config=sample_config(), services=services)

    async with app.run_test() as pilot:
        await _settle(app, pilot)

        assert isinstance(app.screen, AlertModal)
        assert "connection refused" in app.screen.message
        assert len(_pane(app).children) == 0


@pytest.mark.asyncio
async def test_submitting_search_navigates(fake_services, sample_config) -> None:
    services = fake_services()
    app = SearchViewer("/", config=sample_config(), services=services)

    async with app.run_test() as pilot:
        await _settle(app, pilot)
        services.search.search.assert_not_awaited()

        search_input = app.query_one("#search-input", Input)
        search_input.focus()
        search_input.value = " dogs & cats "
        await pilot.press("enter")
        await _settle(app, pilot)

        assert app.location == "/?q=dogs%20%26%20cats"
        assert app.navigation.query == "dogs & cats"

    assert services.search.search.await_args.kwargs["encoded_query"] == "dogs%20%26%20cats"


@pytest.mark.asyncio
async def test_view_options_dialog_switches_view(fake_services, sample_config) -> None:
    services = fake_services(records=[])
    app = SearchViewer("/", config=sample_config(), services=services)

    async with app.run_test() as pilot:
        await _settle(app, pilot)
        _pane(app).focus()
        await pilot.press("v")
        await pilot.pause()

        modal = app.screen
        assert isinstance(modal, ViewOptionsModal)
        assert modal.selected_view() == "search"
        modal.query_one("#history-view", RadioButton).value = True
        await pilot.pause()
        modal.query_one("#view-options-apply", Button).press()
        await pilot.pause()
        await _settle(app, pilot)

        assert app.location == "/?view=history"
        assert app.active_view is View.HISTORY

    services.session.list_records.assert_awaited_once()
    assert services.session.list_records.await_args.kwargs["view"] is View.HISTORY
