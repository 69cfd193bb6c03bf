"""
Configuration management for the collector.

Uses pydantic-settings to load configuration from environment variables
and .env files, and derives the on-disk storage layout from it.
"""

from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path
from typing import Optional

from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings, SettingsConfigDict

PROJECT_ROOT = Path(__file__).resolve().parent.parent.parent


class StorageConfigError(RuntimeError):
    """Raised when the storage base cannot be resolved from configuration."""


@dataclass(frozen=True, slots=True)
class StorageLayout:
    """Directories used by the collector during ingestion."""

    documents_root: Path
    hot_dir: Path
    tmp_dir: Path

    @property
    def custom_documents_dir(self) -> Path:
        """Default folder for documents written without an explicit destination."""
        return self.documents_root / "custom-documents"

    @classmethod
    def from_base(cls, base: Path) -> "StorageLayout":
        """Build the production layout rooted at ``base``."""
        base = Path(base).expanduser().resolve()
        return cls(
            documents_root=base / "documents",
            hot_dir=base / "hotdir",
            tmp_dir=base / "tmp",
        )


class Settings(BaseSettings):
    """Application settings loaded from environment."""

    # Runtime environment ("development" switches to the in-repo layout)
    environment: str = Field(
        default="production",
        validation_alias=AliasChoices("collector_env", "node_env"),
    )

    # Storage Configuration
    storage_dir: Optional[Path] = None
    dev_root: Path = PROJECT_ROOT
    hot_dir: Optional[Path] = None
    tmp_dir: Optional[Path] = None

    # API Configuration
    api_port: int = 8888
    log_level: str = "INFO"
    api_title: str = "Document Collector API"
    api_version: str = "1.0.0"

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        env_ignore_empty=True,
        populate_by_name=True,
    )

    @property
    def is_development(self) -> bool:
        return self.environment.strip().lower() == "development"

    def storage_layout(self) -> StorageLayout:
        """
        Resolve the documents root, hot directory and tmp directory.

        Development mode uses fixed paths below ``dev_root``. Otherwise
        ``storage_dir`` is required.

        Raises:
            StorageConfigError: If not in development and no storage dir is set
        """
        if self.is_development:
            root = self.dev_root.expanduser().resolve()
            layout = StorageLayout(
                documents_root=root / "storage" / "documents",
                hot_dir=root / "hotdir",
                tmp_dir=root / "storage" / "tmp",
            )
        elif self.storage_dir is None:
            raise StorageConfigError(
                "Missing required environment variable: STORAGE_DIR"
            )
        else:
            layout = StorageLayout.from_base(self.storage_dir)

        return StorageLayout(
            documents_root=layout.documents_root,
            hot_dir=self.hot_dir.expanduser().resolve() if self.hot_dir else layout.hot_dir,
            tmp_dir=self.tmp_dir.expanduser().resolve() if self.tmp_dir else layout.tmp_dir,
        )


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
