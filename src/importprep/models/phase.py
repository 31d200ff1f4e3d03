"""Importer lifecycle phases as reported by the server."""

from enum import Enum


class Phase(str, Enum):
    """Backend-reported lifecycle stage of an import job."""

    NEW = "importer_new"
    UPLOADING = "importer_uploading"
    DOWNLOADING_FILE = "importer_downloading_file"
    FILE_LOADED = "importer_file_loaded"
    PREPARING_STARTED = "importer_preparing_started"
    PREPARING_USERS = "importer_preparing_users"
    PREPARING_CHANNELS = "importer_preparing_channels"
    PREPARING_MESSAGES = "importer_preparing_messages"
    USER_SELECTION = "importer_user_selection"
    IMPORTING_STARTED = "importer_importing_started"
    IMPORTING_USERS = "importer_importing_users"
    IMPORTING_CHANNELS = "importer_importing_channels"
    IMPORTING_MESSAGES = "importer_importing_messages"
    IMPORTING_FILES = "importer_importing_files"
    FINISHING = "importer_finishing"
    DONE = "importer_done"
    ERROR = "importer_import_failed"
    CANCELLED = "importer_import_cancelled"

    @property
    def display_key(self) -> str:
        """Translation key for the phase heading."""
        return self.value.replace("importer_", "importer_status_", 1)


WAITING_PHASES = frozenset({Phase.NEW, Phase.UPLOADING, Phase.DOWNLOADING_FILE})

FILE_READY_PHASES = frozenset({Phase.FILE_LOADED})

PREPARING_STARTED_PHASES = frozenset(
    {
        Phase.PREPARING_STARTED,
        Phase.PREPARING_USERS,
        Phase.PREPARING_CHANNELS,
        Phase.PREPARING_MESSAGES,
    }
)

IMPORTING_STARTED_PHASES = frozenset(
    {
        Phase.IMPORTING_STARTED,
        Phase.IMPORTING_USERS,
        Phase.IMPORTING_CHANNELS,
        Phase.IMPORTING_MESSAGES,
        Phase.IMPORTING_FILES,
        Phase.FINISHING,
    }
)

IMPORTING_ERROR_PHASES = frozenset({Phase.ERROR, Phase.CANCELLED})


def parse_phase(value: "Phase | str | None") -> "Phase | str | None":
    """Return the matching Phase, or the raw value when it is not a known phase."""
    if value is None or isinstance(value, Phase):
        return value
    try:
        return Phase(value)
    except ValueError:
        return value
