"""Terminal client for a personal search server and its session views."""

from search_viewer.models import Record, SearchResult, View

__version__ = "0.1.0"

__all__ = [
    "Record",
    "SearchResult",
    "View",
    "__version__",
]
