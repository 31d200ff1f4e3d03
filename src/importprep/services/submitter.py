"""Starts the import with the operator's selection."""

import logging
from typing import Any, Protocol

from importprep.errors import BackendError, SubmitFailure
from importprep.models.selection import SelectionState

logger = logging.getLogger(__name__)


class StartImportEndpoint(Protocol):
    async def start_import(self, payload: dict[str, Any]) -> None: ...


class ImportSubmitter:
    """Packages a selection and requests import start."""

    def __init__(self, client: StartImportEndpoint) -> None:
        self._client = client

    async def submit(self, selection: SelectionState) -> None:
        """Send every row with its current flag; the server picks the subset."""
        payload = {"input": selection.to_payload()}
        logger.info(
            "Starting import with %d/%d users and %d/%d channels",
            selection.users.selected_count,
            len(selection.users),
            selection.channels.selected_count,
            len(selection.channels),
        )
        try:
            await self._client.start_import(payload)
        except BackendError as e:
            logger.error("Start import rejected: %s", e)
            raise SubmitFailure.from_backend(e) from e
