"""Service layer for the search and session HTTP endpoints."""

from search_viewer.services.search_service import fetch_search_results
from search_viewer.services.session_service import (
    append_record,
    list_records,
    remove_record,
)

__all__ = [
    "append_record",
    "fetch_search_results",
    "list_records",
    "remove_record",
]
