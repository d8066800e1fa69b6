"""Toolkit configuration using Pydantic settings."""

from pathlib import Path
from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Settings loaded from environment variables prefixed with ``LINGO_``."""

    model_config = SettingsConfigDict(
        env_prefix="LINGO_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Application layout
    base_path: Path = Field(default=Path("."), description="Application root")
    lang_path: Optional[Path] = Field(default=None, description="Directory holding <locale>.json files")

    # Defaults
    locale: str = Field(default="en", description="Fallback locale")
    default_scan_path: str = Field(default="resources/views", description="Scan target when none given")
    extensions: list[str] = Field(default_factory=lambda: ["php"], description="File extensions to scan")

    # Logging
    log_level: str = Field(default="WARNING", description="Logging level for the CLI")

    @property
    def root(self) -> Path:
        """Application root as a path."""
        return Path(self.base_path)

    @property
    def lang_dir(self) -> Path:
        """Directory of the locale JSON files."""
        if self.lang_path is None:
            return self.root / "lang"
        lang_path = Path(self.lang_path)
        return lang_path if lang_path.is_absolute() else self.root / lang_path

    @property
    def resource_dir(self) -> Path:
        """Resources directory of the application."""
        return self.root / "resources"
