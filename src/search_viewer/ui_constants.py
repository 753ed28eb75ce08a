"""Internal UI constants for the SearchViewer app."""

from __future__ import annotations

from textual.binding import Binding, BindingType

APP_CSS = """
Screen {
    background: $background;
}

#search-bar {
    height: auto;
    padding: 0 1;
    background: $panel;
}

#search-input {
    width: 1fr;
}

#execution-stats {
    height: 1;
    padding: 0 1;
    color: $text-muted;
}

#results {
    border: tall $primary-darken-2;
}

#results:focus-within {
    border: tall $accent;
}
"""

APP_BINDINGS: list[BindingType] = [
    Binding("q", "quit", "Quit"),
    Binding("slash", "focus_search", "Search"),
    Binding("v", "view_options", "Views"),
    Binding("escape", "focus_results", "Results", show=False),
]

__all__ = [
    "APP_BINDINGS",
    "APP_CSS",
]
