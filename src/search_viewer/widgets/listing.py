"""Widgets that apply list view models to the Textual widget tree."""

from __future__ import annotations

import logging

from rich.markup import escape as escape_markup
from textual.app import ComposeResult
from textual.containers import Horizontal, Vertical, VerticalScroll
from textual.css.query import NoMatches
from textual.message import Message
from textual.widgets import Button, Label, Static

from search_viewer.rendering import FAVORITED_LABEL, ListItemModel, ListModel

logger = logging.getLogger(__name__)


def escape_rich_text(text: str) -> str:
    """Escape text for safe Rich markup rendering."""
    return escape_markup(text) if text else ""


class RecordItem(Horizontal):
    """A single list entry: source URL, title, detail line, and one action button."""

    class ActionRequested(Message):
        """Posted when the item's action button is pressed."""

        def __init__(self, item: RecordItem) -> None:
            super().__init__()
            self.item = item

        @property
        def model(self) -> ListItemModel:
            return self.item.model

    DEFAULT_CSS = """
    RecordItem {
        height: auto;
        padding: 0 1;
        margin-bottom: 1;
    }

    RecordItem .record-body {
        width: 1fr;
        height: auto;
    }

    RecordItem .record-url {
        color: $text-muted;
    }

    RecordItem .record-title {
        color: $accent;
        text-style: bold;
    }

    RecordItem .record-detail {
        color: $text-muted;
    }

    RecordItem .record-action {
        min-width: 16;
    }
    """

    def __init__(self, model: ListItemModel) -> None:
        super().__init__(id=model.item_id)
        self.model = model

    def compose(self) -> ComposeResult:
        with Vertical(classes="record-body"):
            yield Static(f"[dim]{escape_rich_text(self.model.url)}[/]", classes="record-url")
            yield Static(escape_rich_text(self.model.title), classes="record-title")
            yield Static(escape_rich_text(self.model.detail), classes="record-detail")
            if self.model.preview:
                yield Static(
                    f"[dim italic]{escape_rich_text(self.model.preview)}[/]",
                    classes="record-preview",
                )
        yield Button(
            self.model.action.label,
            disabled=not self.model.action.enabled,
            classes="record-action",
        )

    @property
    def action_button(self) -> Button:
        return self.query_one(".record-action", Button)

    def on_button_pressed(self, event: Button.Pressed) -> None:
        event.stop()
        self.post_message(self.ActionRequested(self))

    def set_action_enabled(self, enabled: bool) -> None:
        """Enable or disable the action button (used while a request is in flight)."""
        try:
            self.action_button.disabled = not enabled
        except NoMatches:
            return

    def mark_favorited(self) -> None:
        """Disable the favorite toggle for good once the server accepted it."""
        try:
            button = self.action_button
        except NoMatches:
            return
        button.label = FAVORITED_LABEL
        button.disabled = True


class ResultsPane(VerticalScroll):
    """Shared results container; rendering into it is append-only."""

    DEFAULT_CSS = """
    ResultsPane {
        height: 1fr;
        padding: 0 1;
    }

    ResultsPane .results-header {
        text-style: bold;
        margin: 1 0;
    }

    ResultsPane .empty-state {
        width: 100%;
        content-align: center middle;
        text-align: center;
        margin-top: 2;
        color: $text-muted;
    }
    """

    async def clear(self) -> None:
        """Remove everything rendered so far."""
        await self.remove_children()

    async def apply(self, model: ListModel) -> None:
        """Mount a list model below whatever is already shown."""
        widgets: list[Static | Label | RecordItem] = []
        if model.header:
            widgets.append(Label(escape_rich_text(model.header), classes="results-header"))
        if model.is_empty:
            if model.empty_message:
                widgets.append(Static(escape_rich_text(model.empty_message), classes="empty-state"))
        else:
            widgets.extend(RecordItem(item) for item in model.items)
        if widgets:
            await self.mount_all(widgets)
        logger.debug("Rendered %d item(s) under %r", len(model.items), model.header)

    def get_item(self, item_id: str) -> RecordItem | None:
        """Find a rendered item by its per-render id."""
        try:
            return self.query_one(f"#{item_id}", RecordItem)
        except NoMatches:
            return None

    async def remove_item(self, item_id: str) -> bool:
        """Remove exactly one rendered item; returns False when it is already gone."""
        item = self.get_item(item_id)
        if item is None:
            return False
        await item.remove()
        return True


__all__ = [
    "RecordItem",
    "ResultsPane",
    "escape_rich_text",
]
