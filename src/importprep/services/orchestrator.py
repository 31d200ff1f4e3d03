"""Reconciles the server's import job with the preparation page.

The orchestrator runs three activities on one event loop: the operation /
file-data polling chain, the progress subscription, and operator edits
followed by a submit. Every continuation checks :attr:`is_alive` before it
touches state, so results that arrive after :meth:`teardown` are dropped.
"""

import asyncio
import logging
from collections.abc import Callable
from dataclasses import dataclass, field
from enum import Enum
from typing import Protocol

from importprep.config import AppConfig, get_config
from importprep.errors import (
    ImportPrepError,
    LoadFailure,
    PollingCancelled,
    SetupMissing,
    SubmitFailure,
)
from importprep.models.import_data import ImportFileData, ImportOperation
from importprep.models.phase import Phase
from importprep.models.selection import SelectionState
from importprep.services.polling import CancellationToken, wait_for
from importprep.services.progress import ProgressEvent, ProgressReceiver, ProgressSubscription
from importprep.services.status_resolver import (
    OperationAction,
    file_data_settled,
    operation_settled,
    resolve_operation,
)
from importprep.services.submitter import ImportSubmitter

logger = logging.getLogger(__name__)


class Route(str, Enum):
    """Destinations the preparation page can leave for."""

    HISTORY = "admin-import"
    NEW_IMPORT = "admin-import-new"
    PROGRESS = "admin-import-progress"


class Router(Protocol):
    def push(self, route: Route) -> None: ...


class Notifier(Protocol):
    def error(self, message: str) -> None: ...


class ImporterEndpoints(Protocol):
    async def get_import_file_data(self) -> ImportFileData | None: ...

    async def get_current_import_operation(self) -> ImportOperation: ...

    async def start_import(self, payload: dict) -> None: ...


@dataclass(frozen=True)
class Redirect:
    """A navigation decision, with the error shown before leaving, if any."""

    route: Route
    error: str | None = None


@dataclass
class PrepareImportState:
    """Shared state of the preparation page."""

    is_preparing: bool = True
    progress_rate: float | None = None
    status: Phase | str | None = None
    message_count: int = 0
    selection: SelectionState = field(default_factory=SelectionState)
    is_importing: bool = False

    @property
    def users_count(self) -> int:
        return self.selection.users.selected_count

    @property
    def channels_count(self) -> int:
        return self.selection.channels.selected_count


class PrepareImportOrchestrator:
    """Drives the import preparation page from mount to redirect."""

    def __init__(
        self,
        client: ImporterEndpoints,
        receiver: ProgressReceiver,
        router: Router,
        notifier: Notifier,
        config: AppConfig | None = None,
        on_change: Callable[[], None] | None = None,
    ) -> None:
        self._client = client
        self._receiver = receiver
        self._router = router
        self._notifier = notifier
        self._config = config or get_config()
        self._on_change = on_change
        self._submitter = ImportSubmitter(client)
        self._token = CancellationToken()
        self._subscription: ProgressSubscription | None = None
        self._task: asyncio.Task | None = None
        self._alive = True
        self.state = PrepareImportState()

    @property
    def is_alive(self) -> bool:
        return self._alive

    def mount(self) -> asyncio.Task:
        """Subscribe to progress events and start loading in the background."""
        self._subscription = self._receiver.subscribe(self._handle_progress)
        self._task = asyncio.create_task(self.run())
        return self._task

    def teardown(self) -> None:
        """Stop polling and event delivery; later results are discarded."""
        self._alive = False
        self._token.cancel()
        if self._subscription is not None:
            self._subscription.close()
        if self._task is not None and not self._task.done():
            self._task.cancel()
        logger.debug("Import preparation torn down")

    async def run(self) -> Redirect | None:
        """Resolve the current operation and load file data when there is some."""
        interval = self._config.polling.interval_seconds

        try:
            operation = await wait_for(
                self._client.get_current_import_operation,
                operation_settled,
                interval=interval,
                token=self._token,
            )
        except PollingCancelled:
            return None
        except Exception:
            logger.exception("Failed to load current import operation")
            return self._redirect(Route.HISTORY, LoadFailure())

        if not self._alive:
            return None

        resolution = resolve_operation(operation)
        logger.info("Import operation status %s resolved to %s", operation.status, resolution.action.value)

        if resolution.action is OperationAction.REDIRECT_NEW:
            return self._redirect(Route.NEW_IMPORT)
        if resolution.action is OperationAction.REDIRECT_PROGRESS:
            return self._redirect(Route.PROGRESS)
        if resolution.action is OperationAction.LOAD_FILE_DATA:
            self.state.status = operation.status
            self._changed()
            return await self._load_file_data()
        if resolution.action is OperationAction.REDIRECT_HISTORY_DONE:
            return self._redirect(Route.HISTORY)
        return self._redirect(Route.HISTORY, resolution.error)

    async def _load_file_data(self) -> Redirect | None:
        try:
            data = await wait_for(
                self._client.get_import_file_data,
                file_data_settled,
                interval=self._config.polling.interval_seconds,
                token=self._token,
            )
        except PollingCancelled:
            return None
        except Exception as e:
            logger.exception("Failed to load import file data")
            return self._redirect(Route.HISTORY, LoadFailure.from_backend(e))

        if not self._alive:
            return None

        if data is None:
            return self._redirect(Route.HISTORY, SetupMissing())

        if data.step:
            logger.error("Import failed at step %s before user selection", data.step)
            return self._redirect(Route.HISTORY, LoadFailure())

        self.state.message_count = data.message_count
        self.state.selection = SelectionState.from_file_data(data)
        self.state.is_preparing = False
        self.state.progress_rate = None
        logger.info(
            "Import data ready: %d messages, %d users, %d channels",
            data.message_count,
            len(data.users),
            len(data.channels),
        )
        self._changed()
        return None

    def _handle_progress(self, event: ProgressEvent) -> None:
        if not self._alive:
            return
        self.state.progress_rate = event.rate
        self._changed()

    async def start_import(self) -> Redirect | None:
        """Submit the selection; ignored while a submit is already in flight."""
        if self.state.is_importing:
            return None

        self.state.is_importing = True
        self._changed()
        try:
            await self._submitter.submit(self.state.selection)
        except SubmitFailure as e:
            if not self._alive:
                return None
            self.state.is_importing = False
            self._changed()
            return self._redirect(Route.HISTORY, e)

        if not self._alive:
            return None
        return self._redirect(Route.PROGRESS)

    def go_back(self) -> Redirect | None:
        """Leave for the import history."""
        return self._redirect(Route.HISTORY)

    def _redirect(self, route: Route, error: ImportPrepError | None = None) -> Redirect | None:
        if not self._alive:
            return None
        message = error.message if error is not None else None
        if message is not None:
            self._notifier.error(message)
        self._router.push(route)
        return Redirect(route, message)

    def _changed(self) -> None:
        if self._on_change is not None:
            self._on_change()
