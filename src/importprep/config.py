"""Application configuration."""

import os
from pathlib import Path

from pydantic import BaseModel, Field, SecretStr


class ServerConfig(BaseModel):
    """Chat server connection settings."""

    url: str = Field(
        default_factory=lambda: os.environ.get("IMPORTPREP_SERVER_URL", "http://localhost:3000")
    )
    user_id: str = Field(default_factory=lambda: os.environ.get("IMPORTPREP_USER_ID", ""))
    auth_token: SecretStr = Field(
        default_factory=lambda: SecretStr(os.environ.get("IMPORTPREP_AUTH_TOKEN", ""))
    )
    timeout_seconds: float = 30.0


class PollingConfig(BaseModel):
    """Polling settings."""

    interval_ms: int = Field(
        default_factory=lambda: int(os.environ.get("IMPORTPREP_POLL_INTERVAL_MS", "1000")),
        ge=1,
    )

    @property
    def interval_seconds(self) -> float:
        """Poll interval in seconds."""
        return self.interval_ms / 1000


class AppConfig(BaseModel):
    """Main application configuration."""

    server: ServerConfig = Field(default_factory=ServerConfig)
    polling: PollingConfig = Field(default_factory=PollingConfig)
    log_level: str = Field(
        default_factory=lambda: os.environ.get("IMPORTPREP_LOG_LEVEL", "INFO")
    )

    @classmethod
    def load(cls, config_path: Path | None = None) -> "AppConfig":
        """Load configuration from file or defaults."""
        if config_path is None:
            config_path = Path.home() / ".importprep" / "config.toml"

        if config_path.exists():
            import tomllib

            with open(config_path, "rb") as f:
                data = tomllib.load(f)
            return cls.model_validate(data)

        return cls()


# Global config instance
_config: AppConfig | None = None


def get_config() -> AppConfig:
    """Get or create the global config instance."""
    global _config
    if _config is None:
        _config = AppConfig.load()
    return _config
