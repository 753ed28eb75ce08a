"""Data models and constants for the search viewer."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any

# Application identity: single source of truth for platformdirs config paths
CONFIG_APP_NAME = "search-viewer"

# Default origin of the search server (the server listens on 8080 by default)
DEFAULT_SERVER_URL = "http://localhost:8080"

# Display sentinel for records without a title
NO_TITLE = "[No Title]"


class View(str, Enum):
    """Named presentation modes."""

    SEARCH = "search"
    HISTORY = "history"
    VISITED = "visited"
    FAVORITES = "favorites"


SESSION_VIEWS: tuple[View, ...] = (View.HISTORY, View.VISITED, View.FAVORITES)


class ListMode(str, Enum):
    """Per-item affordance rendered by the list renderer."""

    FAVORITE_TOGGLE = "favorite"
    REMOVE_BUTTON = "remove"


@dataclass(frozen=True, slots=True)
class ViewCopy:
    """View-specific copy and affordance for a session collection."""

    header: str
    empty_message: str
    timestamp_label: str
    mode: ListMode


VIEW_COPY: dict[View, ViewCopy] = {
    View.HISTORY: ViewCopy(
        header="📜 Search History",
        empty_message="No history...",
        timestamp_label="Searched on",
        mode=ListMode.FAVORITE_TOGGLE,
    ),
    View.VISITED: ViewCopy(
        header="🖱️ Pages Visited",
        empty_message="No pages visited...",
        timestamp_label="Visited on",
        mode=ListMode.FAVORITE_TOGGLE,
    ),
    View.FAVORITES: ViewCopy(
        header="⭐ Favorites",
        empty_message="No favorites...",
        timestamp_label="Favorited on",
        mode=ListMode.REMOVE_BUTTON,
    ),
}


def _coerce_timestamp(value: Any) -> int | None:
    """Parse an epoch-millisecond timestamp sent as a number or numeric string."""
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        return int(value)
    if isinstance(value, str) and value.strip():
        try:
            return int(float(value.strip()))
        except ValueError:
            return None
    return None


@dataclass(frozen=True, slots=True)
class Record:
    """A timestamped URL/title entry from a session collection."""

    url: str
    title: str = ""
    timestamp: int = 0
    is_favorite: bool = False

    @classmethod
    def from_dict(cls, data: Any) -> Record:
        """Build a record from one wire object.

        Raises:
            ValueError: If the object is not a mapping or has no url.
        """
        if not isinstance(data, dict):
            raise ValueError(f"Session record must be an object, got {type(data).__name__}")
        url = data.get("url")
        if not isinstance(url, str) or not url:
            raise ValueError("Session record is missing its url")
        title = data.get("title")
        return cls(
            url=url,
            title=title if isinstance(title, str) else "",
            timestamp=_coerce_timestamp(data.get("timestamp")) or 0,
            is_favorite=data.get("isFavorite") is True,
        )


@dataclass(frozen=True, slots=True)
class SearchResult:
    """One ranked result returned by the search endpoint."""

    where: str
    title: str = ""
    count: int = 0
    score: float = 0.0
    timestamp: int | None = None
    description: str = ""

    @classmethod
    def from_dict(cls, data: Any) -> SearchResult:
        """Build a search result from one wire object.

        Raises:
            ValueError: If the object is not a mapping or has no source URL.
        """
        if not isinstance(data, dict):
            raise ValueError(f"Search result must be an object, got {type(data).__name__}")
        where = data.get("where")
        if not isinstance(where, str) or not where:
            raise ValueError("Search result is missing its source URL")
        title = data.get("title")
        description = data.get("description")
        count = data.get("count", 0)
        score = data.get("score", 0.0)
        return cls(
            where=where,
            title=title if isinstance(title, str) else "",
            count=int(count) if isinstance(count, (int, float)) else 0,
            score=float(score) if isinstance(score, (int, float)) else 0.0,
            timestamp=_coerce_timestamp(data.get("timestamp")),
            description=description if isinstance(description, str) else "",
        )


__all__ = [
    "CONFIG_APP_NAME",
    "DEFAULT_SERVER_URL",
    "NO_TITLE",
    "SESSION_VIEWS",
    "VIEW_COPY",
    "ListMode",
    "Record",
    "SearchResult",
    "View",
    "ViewCopy",
]
