"""Screen classes for the import preparation client."""

from importprep.screens.prepare_import import PrepareImportScreen

__all__ = [
    "PrepareImportScreen",
]
