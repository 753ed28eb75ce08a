"""Action handlers that sync user actions with the session service.

Each handler calls the service, then patches only the widget it acted on.
Failures are reported with a blocking alert and leave the widget tree as
it was before the action.
"""

from __future__ import annotations

import logging
import webbrowser
from typing import TYPE_CHECKING

import httpx

from search_viewer.action_messages import build_request_error
from search_viewer.models import View
from search_viewer.navigation import build_search_location
from search_viewer.rendering import ItemActionKind

if TYPE_CHECKING:
    from search_viewer.app import SearchViewer
    from search_viewer.widgets.listing import RecordItem

logger = logging.getLogger(__name__)


async def add_to_session(
    app: SearchViewer,
    view: View,
    url: str,
    title: str | None,
    *,
    item_id: str | None = None,
) -> bool:
    """Append a record to ``view``; returns whether the server accepted it.

    For favorites with an ``item_id``, success disables that item's toggle.
    """
    token = app._render_token
    try:
        await app._get_services().session.append(
            client=app._http_client,
            base_url=app._config.server_url,
            view=view,
            url=url,
            title=title,
        )
    except (httpx.HTTPError, ValueError) as exc:
        logger.warning("Adding %s to %s failed: %s", url, view.value, exc, exc_info=True)
        app.show_alert(build_request_error(f"add to {view.value}", exc))
        return False

    if view is View.FAVORITES and item_id and token == app._render_token:
        item = app._get_results_pane().get_item(item_id)
        if item is not None:
            item.mark_favorited()
    return True


async def remove_favorite(app: SearchViewer, item_id: str, url: str) -> bool:
    """Delete a favorite; on success remove exactly its list item."""
    token = app._render_token
    try:
        await app._get_services().session.remove(
            client=app._http_client,
            base_url=app._config.server_url,
            url=url,
            view=View.FAVORITES,
        )
    except (httpx.HTTPError, ValueError) as exc:
        logger.warning("Removing favorite %s failed: %s", url, exc, exc_info=True)
        app.show_alert(build_request_error("remove the favorite", exc))
        return False

    if token == app._render_token:
        await app._get_results_pane().remove_item(item_id)
    return True


async def favorite_item(app: SearchViewer, item: RecordItem) -> None:
    """Favorite a history/visited entry.

    The toggle stays disabled while the request is in flight so repeated
    presses cannot create duplicate favorites; it comes back only on failure.
    """
    item.set_action_enabled(False)
    added = await add_to_session(
        app,
        View.FAVORITES,
        item.model.url,
        item.model.title,
        item_id=item.model.item_id,
    )
    if not added:
        item.set_action_enabled(True)


async def unfavorite_item(app: SearchViewer, item: RecordItem) -> None:
    """Remove a favorites entry, guarding against repeated presses."""
    item.set_action_enabled(False)
    removed = await remove_favorite(app, item.model.item_id, item.model.url)
    if not removed:
        item.set_action_enabled(True)


async def open_result(app: SearchViewer, url: str, title: str | None) -> None:
    """Open a search result and record the visit."""
    if app._config.open_in_browser:
        try:
            webbrowser.open(url)
        except (webbrowser.Error, OSError) as e:
            logger.warning("Failed to open %s in the browser: %s", url, e)
    await add_to_session(app, View.VISITED, url, title)


def handle_item_action(app: SearchViewer, item: RecordItem) -> None:
    """Dispatch a pressed item button to its action handler."""
    kind = item.model.action.kind
    if kind is ItemActionKind.OPEN:
        app._track_task(open_result(app, item.model.url, item.model.title))
    elif kind is ItemActionKind.FAVORITE:
        app._track_task(favorite_item(app, item))
    elif kind is ItemActionKind.REMOVE:
        app._track_task(unfavorite_item(app, item))


def run_search(app: SearchViewer, raw_query: str) -> None:
    """Navigate to the search location for ``raw_query``."""
    app.navigate(build_search_location(raw_query))


__all__ = [
    "add_to_session",
    "favorite_item",
    "handle_item_action",
    "open_result",
    "remove_favorite",
    "run_search",
    "unfavorite_item",
]
