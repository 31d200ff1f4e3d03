"""Custom widgets for the import preparation client."""

from importprep.widgets.selection_table import SelectionTable

__all__ = [
    "SelectionTable",
]
