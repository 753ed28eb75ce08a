"""Navigation state: parse locations and resolve which view to render."""

from __future__ import annotations

from dataclasses import dataclass
from urllib.parse import parse_qsl, quote, unquote, urlsplit

from search_viewer.models import View

# Characters encodeURIComponent leaves untouched besides alphanumerics
_URI_COMPONENT_SAFE = "-_.!~*'()"


@dataclass(frozen=True, slots=True)
class NavigationState:
    """Immutable navigation state derived once per render from a location.

    ``view`` is the raw ``view`` parameter (``None`` when absent) and
    ``query`` the raw ``q`` parameter (empty when absent).
    """

    view: str | None = None
    query: str = ""


def parse_location(location: str) -> NavigationState:
    """Parse a location (``/?view=history``, ``?q=cats``, a full URL) into state.

    Repeated parameters keep their last value.
    """
    params = dict(parse_qsl(urlsplit(location or "").query, keep_blank_values=True))
    return NavigationState(view=params.get("view"), query=params.get("q", ""))


def resolve_view(state: NavigationState) -> View | None:
    """Resolve the view to render.

    Absent or empty ``view`` means search; unknown values resolve to ``None``
    so that nothing is rendered.
    """
    if not state.view:
        return View.SEARCH
    try:
        return View(state.view)
    except ValueError:
        return None


def encode_query(raw: str) -> str:
    """Trim and percent-encode a query the way ``encodeURIComponent`` does."""
    return quote(raw.strip(), safe=_URI_COMPONENT_SAFE)


def decode_query(encoded: str) -> str:
    """Reverse :func:`encode_query` for display."""
    return unquote(encoded)


def build_view_location(choice: str | None) -> str:
    """Location for a view switch; no choice goes back to the root."""
    if choice:
        return f"/?view={choice}"
    return "/"


def build_search_location(raw_query: str) -> str:
    """Location for a search submitted from the search input."""
    encoded = encode_query(raw_query)
    if not encoded:
        return "/"
    return f"/?q={encoded}"


def build_history_url(origin: str, encoded_query: str) -> str:
    """Canonical URL recorded in the history collection for a search."""
    return f"{origin}?q={encoded_query}"


__all__ = [
    "NavigationState",
    "build_history_url",
    "build_search_location",
    "build_view_location",
    "decode_query",
    "encode_query",
    "parse_location",
    "resolve_view",
]
