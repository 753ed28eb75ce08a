"""General-purpose modal dialogs: the blocking alert and the view options."""

from __future__ import annotations

from textual import on
from textual.app import ComposeResult
from textual.binding import Binding
from textual.containers import Horizontal, Vertical
from textual.css.query import NoMatches
from textual.screen import ModalScreen
from textual.widgets import Button, Label, RadioButton, RadioSet, Static

from search_viewer.models import View
from search_viewer.widgets.listing import escape_rich_text

VIEW_OPTION_LABELS: dict[View, str] = {
    View.SEARCH: "🔎 Search",
    View.HISTORY: "📜 Search History",
    View.VISITED: "🖱️ Pages Visited",
    View.FAVORITES: "⭐ Favorites",
}


def view_option_id(view: View) -> str:
    """Widget id of the view option control for ``view``."""
    return f"{view.value}-view"


# ============================================================================
# Alert
# ============================================================================


class AlertModal(ModalScreen[None]):
    """Blocking notification; the user has to acknowledge it before continuing."""

    BINDINGS = [
        Binding("enter", "dismiss_alert", "OK"),
        Binding("escape", "dismiss_alert", "OK", show=False),
    ]

    CSS = """
    AlertModal {
        align: center middle;
    }

    #alert-dialog {
        width: 50%;
        min-width: 40;
        height: auto;
        background: $surface;
        border: tall $error;
        padding: 0 2;
    }

    #alert-title {
        text-style: bold;
        color: $error;
        margin-bottom: 1;
    }

    #alert-buttons {
        height: auto;
        align: right middle;
    }
    """

    def __init__(self, message: str, title: str = "Error") -> None:
        super().__init__()
        self._message = message
        self._title = title

    @property
    def message(self) -> str:
        return self._message

    def compose(self) -> ComposeResult:
        with Vertical(id="alert-dialog"):
            yield Label(escape_rich_text(self._title), id="alert-title")
            yield Static(escape_rich_text(self._message), id="alert-message")
            with Horizontal(id="alert-buttons"):
                yield Button("OK (Enter)", variant="primary", id="alert-ok")

    def on_mount(self) -> None:
        self.query_one("#alert-ok", Button).focus()

    def action_dismiss_alert(self) -> None:
        self.dismiss(None)

    @on(Button.Pressed, "#alert-ok")
    def on_ok(self) -> None:
        self.dismiss(None)


# ============================================================================
# View Options
# ============================================================================


class ViewOptionsModal(ModalScreen[str | None]):
    """Pick which view to show.

    Dismisses with the chosen view name, or ``None`` when nothing is
    selected. Cancelling closes the dialog without a result callback.
    """

    BINDINGS = [
        Binding("escape", "cancel", "Cancel"),
    ]

    CSS = """
    ViewOptionsModal {
        align: center middle;
    }

    #view-options-dialog {
        width: 40;
        height: auto;
        background: $surface;
        border: tall $accent;
        padding: 0 2;
    }

    #view-options-title {
        text-style: bold;
        margin-bottom: 1;
    }

    #view-options-buttons {
        height: auto;
        align: right middle;
        margin-top: 1;
    }

    #view-options-buttons Button {
        margin-left: 1;
    }
    """

    def __init__(self, active: View | None = None) -> None:
        super().__init__()
        self._active = active

    def compose(self) -> ComposeResult:
        with Vertical(id="view-options-dialog"):
            yield Label("Options", id="view-options-title")
            with RadioSet(id="view-options"):
                for view, label in VIEW_OPTION_LABELS.items():
                    yield RadioButton(label, value=view is self._active, id=view_option_id(view))
            with Horizontal(id="view-options-buttons"):
                yield Button("Apply", variant="primary", id="view-options-apply")
                yield Button("Cancel (Esc)", variant="default", id="view-options-cancel")

    def selected_view(self) -> str | None:
        """Return the view whose option is checked, if any."""
        try:
            pressed = self.query_one("#view-options", RadioSet).pressed_button
        except NoMatches:
            return None
        if pressed is None or pressed.id is None:
            return None
        return pressed.id.removesuffix("-view")

    def action_cancel(self) -> None:
        self.app.pop_screen()

    @on(Button.Pressed, "#view-options-apply")
    def on_apply(self) -> None:
        self.dismiss(self.selected_view())

    @on(Button.Pressed, "#view-options-cancel")
    def on_cancel(self) -> None:
        self.action_cancel()


__all__ = [
    "VIEW_OPTION_LABELS",
    "AlertModal",
    "ViewOptionsModal",
    "view_option_id",
]
