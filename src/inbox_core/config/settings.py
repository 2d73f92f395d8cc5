"""Pydantic-based settings for Thread Inbox."""

from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Configuration settings for the CLI and the GUI server."""

    model_config = SettingsConfigDict(
        env_prefix="THREAD_INBOX_",
        case_sensitive=False,
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Service settings
    host: str = Field(default="127.0.0.1", description="GUI server host")
    port: int = Field(default=3334, description="GUI server port")
    port_attempts: int = Field(default=10, ge=1, description="Consecutive ports to try when the port is busy")
    log_level: str = Field(default="INFO", description="Logging level")
    open_browser: bool = Field(default=True, description="Open the GUI in a browser on start")

    # Data directory, defaults to the working directory
    data_dir: str | None = Field(default=None, description="Directory holding the threads file")

    def resolve_dir(self, directory: str | Path | None = None) -> Path:
        """Directory to operate on: explicit argument, then data_dir, then cwd."""
        if directory:
            return Path(directory)
        if self.data_dir:
            return Path(self.data_dir)
        return Path.cwd()

    @property
    def log_format(self) -> str:
        """Log message format."""
        return "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


# Global settings instance
settings = Settings()
