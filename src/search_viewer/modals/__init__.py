"""Modal dialogs for the search viewer.

Import modals from this package: ``from search_viewer.modals import AlertModal``
"""

from search_viewer.modals.common import (
    VIEW_OPTION_LABELS,
    AlertModal,
    ViewOptionsModal,
    view_option_id,
)

__all__ = [
    "VIEW_OPTION_LABELS",
    "AlertModal",
    "ViewOptionsModal",
    "view_option_id",
]
