"""View controller: resolve the navigation state, fetch, and render a view."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import httpx

from search_viewer.action_messages import build_request_error
from search_viewer.actions.session_actions import add_to_session
from search_viewer.modals import ViewOptionsModal
from search_viewer.models import VIEW_COPY, View
from search_viewer.navigation import (
    NavigationState,
    build_history_url,
    build_view_location,
    decode_query,
    encode_query,
    resolve_view,
)
from search_viewer.rendering import render_record_list, render_search_page, sort_newest_first

if TYPE_CHECKING:
    from search_viewer.app import SearchViewer

logger = logging.getLogger(__name__)


async def render_page(app: SearchViewer, state: NavigationState, token: int) -> None:
    """Render the view selected by ``state``.

    Triggers at most one fetch: none for an empty search query or an
    unrecognised view. ``token`` identifies this render; results arriving
    after a newer navigation are dropped.
    """
    view = resolve_view(state)
    logger.debug("Rendering view=%r (raw=%r)", view, state.view)
    if view is View.SEARCH:
        await show_search_results(app, encode_query(state.query), token)
    elif view is not None:
        await show_session_view(app, view, token)
    if token == app._render_token:
        app.select_view_option(view)


async def show_search_results(app: SearchViewer, encoded_query: str, token: int) -> None:
    """Run a search, record it in history, and render the results page."""
    if not encoded_query:
        return
    query = decode_query(encoded_query)
    app._get_search_input_widget().value = query

    try:
        results, elapsed = await app._get_services().search.search(
            client=app._http_client,
            base_url=app._config.server_url,
            encoded_query=encoded_query,
            now=app._clock,
        )
    except (httpx.HTTPError, ValueError) as exc:
        if token != app._render_token:
            logger.debug("Dropping failed search for %r after navigation: %s", query, exc)
            return
        logger.warning("Search for %r failed: %s", query, exc, exc_info=True)
        app.show_alert(build_request_error("run the search", exc))
        return

    # A search the user navigated away from is discarded whole, history entry included.
    if token != app._render_token:
        logger.debug("Dropping stale search results for %r", query)
        return

    # Every executed search lands in history, whether or not it found anything.
    app._track_task(
        add_to_session(
            app,
            View.HISTORY,
            build_history_url(app._config.server_url, encoded_query),
            query,
        )
    )

    page = render_search_page(results, query=query, elapsed_seconds=elapsed)
    app._get_stats_widget().update(page.stats_text)
    await app._get_results_pane().apply(page.results)


async def show_session_view(app: SearchViewer, view: View, token: int) -> None:
    """Fetch one session collection and render it newest first."""
    copy = VIEW_COPY[view]
    try:
        records = await app._get_services().session.list_records(
            client=app._http_client,
            base_url=app._config.server_url,
            view=view,
        )
    except (httpx.HTTPError, ValueError) as exc:
        if token != app._render_token:
            logger.debug("Dropping failed %s listing after navigation: %s", view.value, exc)
            return
        logger.warning("Listing %s failed: %s", view.value, exc, exc_info=True)
        app.show_alert(build_request_error(f"load {view.value}", exc))
        return

    if token != app._render_token:
        logger.debug("Dropping stale %s listing", view.value)
        return

    model = render_record_list(
        sort_newest_first(records),
        header=copy.header,
        empty_message=copy.empty_message,
        timestamp_label=copy.timestamp_label,
        mode=copy.mode,
    )
    await app._get_results_pane().apply(model)


def change_view(app: SearchViewer, choice: str | None) -> None:
    """Navigate to the chosen view (the root location when nothing was chosen)."""
    app.navigate(build_view_location(choice))


def action_view_options(app: SearchViewer) -> None:
    """Open the view options dialog and navigate on apply."""

    def on_choice(choice: str | None) -> None:
        change_view(app, choice)

    app.push_screen(ViewOptionsModal(active=app.active_view), on_choice)


__all__ = [
    "action_view_options",
    "change_view",
    "render_page",
    "show_search_results",
    "show_session_view",
]
