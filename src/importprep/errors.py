"""Error taxonomy for import preparation.

Every error here is terminal for the preparation page: none of them is
retried. Each carries the message key shown to the operator.
"""

from typing import Any


class ImportPrepError(Exception):
    """Base class for import preparation errors."""

    message_key = "Failed_To_Load_Import_Data"

    def __init__(self, message: str | None = None) -> None:
        super().__init__(message or self.message_key)
        self.message = message or self.message_key

    @classmethod
    def from_backend(cls, error: BaseException) -> "ImportPrepError":
        """Wrap a backend failure, keeping the server's own text when it has one."""
        details = getattr(error, "details", None)
        if isinstance(details, str) and details:
            return cls(details)
        return cls()


class BackendError(Exception):
    """A request to the chat server failed."""

    def __init__(self, message: str, status_code: int | None = None, details: Any = None) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.details = details


class PollingCancelled(Exception):
    """Raised by a waiter whose cancellation token was triggered."""


class SetupMissing(ImportPrepError):
    """No import has been set up on the server."""

    message_key = "Importer_not_setup"


class LoadFailure(ImportPrepError):
    """The operation or file data could not be loaded."""

    message_key = "Failed_To_Load_Import_Data"


class OperationFailure(ImportPrepError):
    """The server reports the import job itself failed."""

    message_key = "Import_Operation_Failed"


class UnknownPhase(ImportPrepError):
    """The server reported a phase this client does not know."""

    message_key = "Unknown_Import_State"


class SubmitFailure(ImportPrepError):
    """The start-import request was rejected."""

    message_key = "Failed_To_Start_Import"
