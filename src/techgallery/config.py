"""Configuration management for the application."""

import json
from pathlib import Path

from pydantic import BaseModel, Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class SkillRatingConfig(BaseModel):
    """
    Allowed range for skill proficiency ratings.

    Not read from the environment; the range only changes in code or via ``from_file``.
    """

    min_value: int = 0
    max_value: int = 5

    @classmethod
    def from_file(cls, filepath: str = "config/skills.json") -> "SkillRatingConfig":
        """
        Load rating configuration from JSON file.

        Args:
            filepath: Path to the configuration file

        Returns:
            SkillRatingConfig instance
        """
        with open(filepath, "r") as f:
            data = json.load(f)
        return cls(**data)

    def in_range(self, value: int) -> bool:
        """Return True if ``value`` is an accepted rating (bounds inclusive)."""
        return self.min_value <= value <= self.max_value


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    # Data root: the SQLite DB and message catalogs live here (outside the repo)
    data_root: str = Field(default="~/Documents/techgallery")

    # Database: auto-derived from data_root if not explicitly set
    database_url: str | None = Field(default=None)

    # Backend Server
    backend_host: str = Field(default="0.0.0.0")
    backend_port: int = Field(default=8000)

    # Messages
    default_locale: str = Field(default="en")

    # People provider used to sync directory users on import (optional)
    people_api_url: str | None = Field(default=None)
    people_api_timeout_seconds: int = Field(default=10)

    log_level: str = Field(default="INFO")

    @model_validator(mode="after")
    def derive_paths(self) -> "Settings":
        """Expand data_root and derive database_url if not explicitly set."""
        self.data_root = str(Path(self.data_root).expanduser().resolve())
        if self.database_url is None:
            self.database_url = f"sqlite:///{self.data_root}/techgallery.db"
        return self


# Global settings instance
settings = Settings()
