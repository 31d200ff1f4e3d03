"""Importer data returned by the chat server."""

from pydantic import BaseModel, ConfigDict, Field, field_validator

from importprep.models.phase import WAITING_PHASES, Phase, parse_phase


class ImportUser(BaseModel):
    """A user account discovered in the uploaded file."""

    model_config = ConfigDict(extra="ignore")

    user_id: str
    username: str = ""
    email: str = ""
    is_deleted: bool = False
    do_import: bool = True

    @property
    def item_id(self) -> str:
        return self.user_id

    @property
    def is_excluded(self) -> bool:
        """Deleted accounts are dropped first on bulk uncheck."""
        return self.is_deleted


class ImportChannel(BaseModel):
    """A channel discovered in the uploaded file."""

    model_config = ConfigDict(extra="ignore")

    channel_id: str
    name: str = ""
    is_archived: bool = False
    do_import: bool = True

    @property
    def item_id(self) -> str:
        return self.channel_id

    @property
    def is_excluded(self) -> bool:
        """Archived channels are dropped first on bulk uncheck."""
        return self.is_archived


class ImportOperation(BaseModel):
    """Descriptor of the server's current import job."""

    model_config = ConfigDict(extra="ignore")

    valid: bool = False
    status: Phase | str | None = None

    @field_validator("status")
    @classmethod
    def _parse_status(cls, value):
        return parse_phase(value)

    @property
    def is_waiting(self) -> bool:
        """Whether the job is not yet actionable by the client."""
        return self.status in WAITING_PHASES


class ImportFileData(BaseModel):
    """Snapshot of the content discovered while preparing an upload."""

    model_config = ConfigDict(extra="ignore")

    waiting: bool = False
    step: str | None = None
    message_count: int = Field(default=0, ge=0)
    users: list[ImportUser] = Field(default_factory=list)
    channels: list[ImportChannel] = Field(default_factory=list)
