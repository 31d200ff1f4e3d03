"""Data models for the import preparation client."""

from importprep.models.import_data import (
    ImportChannel,
    ImportFileData,
    ImportOperation,
    ImportUser,
)
from importprep.models.phase import (
    FILE_READY_PHASES,
    IMPORTING_ERROR_PHASES,
    IMPORTING_STARTED_PHASES,
    PREPARING_STARTED_PHASES,
    WAITING_PHASES,
    Phase,
)
from importprep.models.selection import Selection, SelectionState

__all__ = [
    "FILE_READY_PHASES",
    "IMPORTING_ERROR_PHASES",
    "IMPORTING_STARTED_PHASES",
    "ImportChannel",
    "ImportFileData",
    "ImportOperation",
    "ImportUser",
    "PREPARING_STARTED_PHASES",
    "Phase",
    "Selection",
    "SelectionState",
    "WAITING_PHASES",
]
