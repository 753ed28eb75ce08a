"""Search viewer TUI: search page plus the history, visited and favorites views."""

from __future__ import annotations

import asyncio
import logging
import time
from collections.abc import Callable
from typing import Any

import httpx
from textual.app import App, ComposeResult
from textual.containers import Horizontal
from textual.css.query import NoMatches
from textual.widgets import Footer, Header, Input, Label

from search_viewer.actions import session_actions as _session_actions
from search_viewer.actions import view_actions as _view_actions
from search_viewer.config import UserConfig
from search_viewer.modals import VIEW_OPTION_LABELS, AlertModal
from search_viewer.models import View
from search_viewer.navigation import NavigationState, parse_location
from search_viewer.services.interfaces import AppServices, build_default_app_services
from search_viewer.ui_constants import APP_BINDINGS, APP_CSS
from search_viewer.ui_runtime import UiRefs
from search_viewer.widgets import RecordItem, ResultsPane

logger = logging.getLogger(__name__)


class SearchViewer(App):
    """A TUI client for a personal search server."""

    TITLE = "Search Viewer"

    CSS = APP_CSS

    BINDINGS = APP_BINDINGS

    def __init__(
        self,
        location: str = "/",
        config: UserConfig | None = None,
        services: AppServices | None = None,
        clock: Callable[[], float] = time.perf_counter,
    ) -> None:
        super().__init__()
        self._config = config or UserConfig()
        self._services: AppServices = services or build_default_app_services()
        self._clock = clock

        # Navigation state; each navigation bumps the token so late
        # responses from an earlier view are dropped.
        self._initial_location = location
        self._location = location
        self._navigation = NavigationState()
        self._render_token: int = 0
        self._active_view: View | None = None

        # Background task tracking (prevent GC of fire-and-forget tasks)
        self._background_tasks: set[asyncio.Task[None]] = set()

        # Shared HTTP client (created in on_mount); it keeps the session cookie
        self._http_client: httpx.AsyncClient | None = None

        self._ui_refs = UiRefs()

    def _get_services(self) -> AppServices:
        """Return app service interfaces, lazily creating defaults for test doubles."""
        services = getattr(self, "_services", None)
        if services is None:
            services = build_default_app_services()
            self._services = services
        return services

    @property
    def location(self) -> str:
        return self._location

    @property
    def navigation(self) -> NavigationState:
        return self._navigation

    @property
    def active_view(self) -> View | None:
        return self._active_view

    def compose(self) -> ComposeResult:
        yield Header()
        with Horizontal(id="search-bar"):
            yield Input(placeholder=" Search…", id="search-input")
        yield Label("", id="execution-stats")
        yield ResultsPane(id="results")
        yield Footer()

    def on_mount(self) -> None:
        """Create the shared HTTP client and render the initial location."""
        self._http_client = httpx.AsyncClient()
        self.sub_title = self._config.server_url
        self._prime_ui_refs()
        logger.debug(
            "App mounted: server=%s, location=%r", self._config.server_url, self._initial_location
        )
        self.navigate(self._initial_location)

    async def on_unmount(self) -> None:
        """Cancel in-flight requests and close the shared HTTP client."""
        background_tasks = getattr(self, "_background_tasks", set())
        pending = [task for task in background_tasks if not task.done()]
        for task in pending:
            task.cancel()
        if pending:
            _, still_pending = await asyncio.wait(pending, timeout=0.5)
            for task in still_pending:
                logger.debug("Background task did not cancel before shutdown: %r", task)
        if hasattr(self, "_background_tasks"):
            self._background_tasks.clear()

        client = self._http_client
        self._http_client = None
        if client is not None:
            try:
                await client.aclose()
            except Exception as e:
                logger.debug(
                    "Failed to close shared HTTP client during shutdown: %s", e, exc_info=True
                )
        ui_refs = getattr(self, "_ui_refs", None)
        if ui_refs is not None:
            ui_refs.reset()

    @staticmethod
    def _is_live_widget(widget: Any) -> bool:
        """Return True for mounted/attached widgets safe to reuse."""
        return bool(widget is not None and getattr(widget, "is_attached", False))

    def _get_cached_widget(self, ref_name: str, resolver: Callable[[], Any]) -> Any:
        """Resolve and cache a widget reference by UiRefs attribute name."""
        ui_refs = getattr(self, "_ui_refs", None)
        if ui_refs is None:
            return resolver()
        widget = getattr(ui_refs, ref_name)
        if self._is_live_widget(widget):
            return widget
        widget = resolver()
        setattr(ui_refs, ref_name, widget)
        return widget

    def _get_search_input_widget(self) -> Input:
        return self._get_cached_widget(
            "search_input", lambda: self.query_one("#search-input", Input)
        )

    def _get_stats_widget(self) -> Label:
        return self._get_cached_widget(
            "execution_stats", lambda: self.query_one("#execution-stats", Label)
        )

    def _get_results_pane(self) -> ResultsPane:
        return self._get_cached_widget("results_pane", lambda: self.query_one(ResultsPane))

    def _prime_ui_refs(self) -> None:
        """Warm caches for the main-screen widgets so modals cannot hide them."""
        for getter in (
            self._get_search_input_widget,
            self._get_stats_widget,
            self._get_results_pane,
        ):
            try:
                getter()
            except NoMatches:
                continue

    def _track_task(self, coro: Any) -> asyncio.Task[None]:
        """Create an asyncio task and track it to prevent garbage collection."""
        task = asyncio.create_task(coro)
        self._background_tasks.add(task)
        task.add_done_callback(self._background_tasks.discard)
        task.add_done_callback(self._on_task_done)
        return task

    @staticmethod
    def _on_task_done(task: asyncio.Task[None]) -> None:
        """Log unhandled exceptions from background tasks."""
        if task.cancelled():
            return
        exc = task.exception()
        if exc is not None:
            logger.error("Unhandled exception in background task: %s", exc, exc_info=exc)

    # ========================================================================
    # Navigation
    # ========================================================================

    def navigate(self, location: str) -> None:
        """Load ``location``: reset the page and render the view it selects."""
        self._location = location
        self._navigation = parse_location(location)
        self._render_token += 1
        logger.debug("Navigating to %r (token=%d)", location, self._render_token)
        self._track_task(self._render_navigation(self._navigation, self._render_token))

    async def _render_navigation(self, state: NavigationState, token: int) -> None:
        if token != self._render_token:
            return
        try:
            self._get_stats_widget().update("")
            await self._get_results_pane().clear()
        except NoMatches:
            return
        await _view_actions.render_page(self, state, token)

    def select_view_option(self, view: View | None) -> None:
        """Reflect the rendered view in the view options and the subtitle."""
        self._active_view = view
        if view is None:
            self.sub_title = self._config.server_url
            return
        self.sub_title = f"{VIEW_OPTION_LABELS[view]} · {self._config.server_url}"

    def show_alert(self, message: str) -> None:
        """Show a blocking alert."""
        self.push_screen(AlertModal(message))

    # ========================================================================
    # Event handlers
    # ========================================================================

    def on_input_submitted(self, event: Input.Submitted) -> None:
        if event.input.id != "search-input":
            return
        _session_actions.run_search(self, event.value)

    def on_record_item_action_requested(self, event: RecordItem.ActionRequested) -> None:
        _session_actions.handle_item_action(self, event.item)

    # ========================================================================
    # Key actions
    # ========================================================================

    def action_focus_search(self) -> None:
        try:
            self._get_search_input_widget().focus()
        except NoMatches:
            return

    def action_focus_results(self) -> None:
        try:
            self._get_results_pane().focus()
        except NoMatches:
            return

    def action_view_options(self) -> None:
        _view_actions.action_view_options(self)


__all__ = [
    "SearchViewer",
]
