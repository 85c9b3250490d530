"""Configuration management using pydantic settings."""

from pathlib import Path
from typing import Literal

from pydantic import BaseModel, Field
from pydantic_settings import BaseSettings


class DatabaseConfig(BaseModel):
    """Database configuration."""

    path: Path = Field(default=Path("tracker.db"))


class LoggingConfig(BaseModel):
    """Logging configuration."""

    level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = Field(default="INFO")
    log_dir: Path = Field(default=Path("logs"))
    json_format: bool = Field(default=False)


class Settings(BaseSettings):
    """Application settings."""

    database: DatabaseConfig = Field(default_factory=DatabaseConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    # Client id used by the demo entry point
    demo_client: int = Field(default=1000, ge=0)

    model_config = {
        "env_prefix": "TRACKER_",
        "env_nested_delimiter": "__",
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "extra": "ignore",
    }


def load_settings() -> Settings:
    """Load settings from environment variables."""
    return Settings()
