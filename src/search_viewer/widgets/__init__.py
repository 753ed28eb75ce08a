"""Widget classes for rendering list view models."""

from search_viewer.widgets.listing import RecordItem, ResultsPane, escape_rich_text

__all__ = [
    "RecordItem",
    "ResultsPane",
    "escape_rich_text",
]
