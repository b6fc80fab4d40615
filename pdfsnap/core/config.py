import logging
from functools import lru_cache
from pathlib import Path
from typing import Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict
from reportlab.lib.pagesizes import A4


class Settings(BaseSettings):
    """Application settings, loaded from the environment and an optional .env file."""

    model_config = SettingsConfigDict(
        env_file=Path(__file__).resolve().parents[2] / ".env",
        env_file_encoding="utf-8",
    )

    app_name: str = "PDFSnap"
    app_version: str = "0.1.0"

    host: str = "0.0.0.0"
    port: int = 5000
    log_level: str = "INFO"

    base_dir: Path = Field(default_factory=lambda: Path(__file__).resolve().parents[2])
    storage_dir: Optional[Path] = None
    public_dir: Optional[Path] = None
    temp_dir: Optional[Path] = None

    allow_origins: list[str] = Field(default_factory=lambda: ["*"])

    # Width of the generated page in points; the height follows the image.
    page_width: float = A4[0]
    conversion_delay_seconds: float = 0.8
    toast_duration_seconds: float = 3.0
    download_ttl_minutes: int = 10

    session_cookie: str = "pdfsnap_session"
    session_ttl_minutes: int = 60

    @field_validator("log_level")
    @classmethod
    def _known_level(cls, value: str) -> str:
        level = value.strip().upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"unknown log level: {value}")
        return level

    def configure_paths(self) -> None:
        """Resolve default directories and create them when missing."""
        self.storage_dir = (self.storage_dir or (self.base_dir / "outputs")).resolve()
        self.public_dir = (self.public_dir or (self.base_dir / "public")).resolve()
        self.temp_dir = (self.temp_dir or (self.storage_dir / "tmp")).resolve()

        for directory in (self.storage_dir, self.temp_dir, self.public_dir):
            directory.mkdir(parents=True, exist_ok=True)


@lru_cache()
def get_settings() -> Settings:
    settings = Settings()
    settings.configure_paths()
    return settings
