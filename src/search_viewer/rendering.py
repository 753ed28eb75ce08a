"""Pure list rendering: turn records and search results into view models.

Nothing here touches widgets. The models are applied to the widget tree by
:mod:`search_viewer.widgets.listing`, which keeps the ordering, copy and
affordance rules testable without a running app.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from datetime import datetime
from enum import Enum

from search_viewer.models import NO_TITLE, ListMode, Record, SearchResult

FAVORITE_LABEL = "Favorite ⭐"
FAVORITED_LABEL = "Already favorited ⭐"
REMOVE_LABEL = "Remove 🗑️"
OPEN_LABEL = "Open ↗"
INVALID_DATE = "Invalid Date"


class ItemActionKind(str, Enum):
    """What the button attached to a list item does."""

    OPEN = "open"
    FAVORITE = "favorite"
    REMOVE = "remove"


@dataclass(frozen=True, slots=True)
class ItemAction:
    kind: ItemActionKind
    label: str
    enabled: bool = True


@dataclass(frozen=True, slots=True)
class ListItemModel:
    """One addressable list entry.

    ``item_id`` is unique within a render so action handlers can later
    disable or remove exactly this entry.
    """

    item_id: str
    url: str
    title: str
    detail: str
    action: ItemAction
    preview: str = ""


@dataclass(frozen=True, slots=True)
class ListModel:
    header: str | None
    items: tuple[ListItemModel, ...]
    empty_message: str | None = None

    @property
    def is_empty(self) -> bool:
        return not self.items


@dataclass(frozen=True, slots=True)
class SearchPageModel:
    stats_text: str
    results: ListModel


def display_title(title: str | None) -> str:
    """Return the title to show, substituting the sentinel for empty titles."""
    return title if title else NO_TITLE


def format_timestamp(timestamp_ms: int) -> str:
    """Format epoch milliseconds as ``<locale date> at <locale time>``.

    Timestamps outside the platform's datetime range render as ``Invalid Date``.
    """
    try:
        moment = datetime.fromtimestamp(timestamp_ms / 1000)
    except (ValueError, OverflowError, OSError):
        return INVALID_DATE
    return f"{moment.strftime('%x')} at {moment.strftime('%X')}"


def format_score(score: float) -> str:
    """Format a relevance score in [0, 1] as a percentage with 2 decimals."""
    return f"{score * 100:.2f}%"


def format_stats(result_count: int, elapsed_seconds: float) -> str:
    """Build the execution stats line shown above search results."""
    noun = "result" if result_count == 1 else "results"
    return f"{result_count} {noun} in about {elapsed_seconds:.2f}s"


def build_no_results_message(query: str) -> str:
    return f"No results found for '{query}'"


def sort_newest_first(records: Iterable[Record]) -> list[Record]:
    """Sort records by timestamp, newest first."""
    return sorted(records, key=lambda record: record.timestamp, reverse=True)


def _item_action(record: Record, mode: ListMode) -> ItemAction:
    if mode is ListMode.REMOVE_BUTTON:
        return ItemAction(ItemActionKind.REMOVE, REMOVE_LABEL)
    if record.is_favorite:
        return ItemAction(ItemActionKind.FAVORITE, FAVORITED_LABEL, enabled=False)
    return ItemAction(ItemActionKind.FAVORITE, FAVORITE_LABEL)


def render_record_list(
    records: Sequence[Record],
    *,
    header: str,
    empty_message: str,
    timestamp_label: str,
    mode: ListMode,
) -> ListModel:
    """Render a session collection in the order given.

    Callers sort beforehand; the renderer keeps the sequence as-is.
    """
    items = tuple(
        ListItemModel(
            item_id=f"record-{index}",
            url=record.url,
            title=display_title(record.title),
            detail=f"{timestamp_label} {format_timestamp(record.timestamp)}",
            action=_item_action(record, mode),
        )
        for index, record in enumerate(records)
    )
    return ListModel(header=header, items=items, empty_message=empty_message)


def format_result_stats(result: SearchResult) -> str:
    """Build the ``Frequency | Score | Processed on`` line for a search result."""
    parts = [f"Frequency: {result.count}", f"Score: {format_score(result.score)}"]
    if result.timestamp is not None:
        parts.append(f"Processed on {format_timestamp(result.timestamp)}")
    return " | ".join(parts)


def render_search_page(
    results: Sequence[SearchResult],
    *,
    query: str,
    elapsed_seconds: float,
) -> SearchPageModel:
    """Render search results in server (relevance) order."""
    stats_text = format_stats(len(results), elapsed_seconds)
    if not results:
        return SearchPageModel(
            stats_text=stats_text,
            results=ListModel(header=None, items=(), empty_message=build_no_results_message(query)),
        )
    items = tuple(
        ListItemModel(
            item_id=f"result-{index}",
            url=result.where,
            title=display_title(result.title),
            detail=format_result_stats(result),
            action=ItemAction(ItemActionKind.OPEN, OPEN_LABEL),
            preview=result.description,
        )
        for index, result in enumerate(results)
    )
    return SearchPageModel(stats_text=stats_text, results=ListModel(header=None, items=items))


__all__ = [
    "FAVORITED_LABEL",
    "FAVORITE_LABEL",
    "INVALID_DATE",
    "OPEN_LABEL",
    "REMOVE_LABEL",
    "ItemAction",
    "ItemActionKind",
    "ListItemModel",
    "ListModel",
    "SearchPageModel",
    "build_no_results_message",
    "display_title",
    "format_result_stats",
    "format_score",
    "format_stats",
    "format_timestamp",
    "render_record_list",
    "render_search_page",
    "sort_newest_first",
]
