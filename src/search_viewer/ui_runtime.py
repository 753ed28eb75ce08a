"""Internal runtime helpers for cached TUI widget refs."""

from __future__ import annotations

from dataclasses import dataclass

from textual.widgets import Input, Label

from search_viewer.widgets import ResultsPane


@dataclass(slots=True)
class UiRefs:
    """Cached widget references for hot UI paths.

    These refs are internal-only and must not be treated as a public API.
    """

    search_input: Input | None = None
    execution_stats: Label | None = None
    results_pane: ResultsPane | None = None

    def reset(self) -> None:
        """Clear all cached refs (for unmount/teardown)."""
        self.search_input = None
        self.execution_stats = None
        self.results_pane = None


__all__ = [
    "UiRefs",
]
