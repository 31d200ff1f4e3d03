"""Business logic services for the import preparation client."""

from importprep.services.importer_client import ImporterClient
from importprep.services.orchestrator import (
    PrepareImportOrchestrator,
    PrepareImportState,
    Redirect,
    Route,
)
from importprep.services.polling import CancellationToken, wait_for
from importprep.services.progress import ProgressEvent, ProgressReceiver, ProgressSubscription
from importprep.services.status_resolver import OperationAction, Resolution, resolve_operation
from importprep.services.submitter import ImportSubmitter

__all__ = [
    "CancellationToken",
    "ImportSubmitter",
    "ImporterClient",
    "OperationAction",
    "PrepareImportOrchestrator",
    "PrepareImportState",
    "ProgressEvent",
    "ProgressReceiver",
    "ProgressSubscription",
    "Redirect",
    "Resolution",
    "Route",
    "resolve_operation",
    "wait_for",
]
