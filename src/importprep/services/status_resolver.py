"""Decides what the preparation page does for a reported operation phase."""

from dataclasses import dataclass
from enum import Enum

from importprep.errors import ImportPrepError, OperationFailure, UnknownPhase
from importprep.models.import_data import ImportFileData, ImportOperation
from importprep.models.phase import (
    FILE_READY_PHASES,
    IMPORTING_ERROR_PHASES,
    IMPORTING_STARTED_PHASES,
    PREPARING_STARTED_PHASES,
    Phase,
)


class OperationAction(str, Enum):
    """Next step for the orchestrator."""

    REDIRECT_NEW = "redirect_new"
    REDIRECT_PROGRESS = "redirect_progress"
    LOAD_FILE_DATA = "load_file_data"
    REDIRECT_HISTORY_ERROR = "redirect_history_error"
    REDIRECT_HISTORY_DONE = "redirect_history_done"


@dataclass(frozen=True)
class Resolution:
    """Outcome of classifying an operation."""

    action: OperationAction
    error: ImportPrepError | None = None


def operation_settled(operation: ImportOperation) -> bool:
    """Polling predicate: stop once there is no job or it left the waiting phases."""
    return not operation.valid or not operation.is_waiting


def file_data_settled(data: ImportFileData | None) -> bool:
    """Polling predicate: stop once no import is set up or preparation finished."""
    return data is None or not data.waiting


def resolve_operation(operation: ImportOperation) -> Resolution:
    """Classify ``operation`` into exactly one action.

    A phase added to :class:`Phase` must land in exactly one branch here.
    """
    status = operation.status

    if not operation.valid:
        return Resolution(OperationAction.REDIRECT_NEW)

    if status in IMPORTING_STARTED_PHASES:
        return Resolution(OperationAction.REDIRECT_PROGRESS)

    if (
        status == Phase.USER_SELECTION
        or status in PREPARING_STARTED_PHASES
        or status in FILE_READY_PHASES
    ):
        return Resolution(OperationAction.LOAD_FILE_DATA)

    if status in IMPORTING_ERROR_PHASES:
        return Resolution(OperationAction.REDIRECT_HISTORY_ERROR, OperationFailure())

    if status == Phase.DONE:
        return Resolution(OperationAction.REDIRECT_HISTORY_DONE)

    return Resolution(OperationAction.REDIRECT_HISTORY_ERROR, UnknownPhase())
