"""Pydantic models for parsing the config.yaml configuration file.

This module contains Pydantic models that correspond to the structure of config.yaml.
These models handle validation and type conversion of the YAML configuration data.
"""

from __future__ import annotations

from pathlib import Path
from typing import Literal

from pydantic import BaseModel, Field, computed_field

DEFAULT_COVER_MIME_TYPES = ["image/jpeg", "image/jpg", "image/png", "image/gif"]


class AppConfig(BaseModel):
    """Application configuration model."""

    environment: Literal["development", "production", "test"] = Field(
        default="development", description="Application environment"
    )
    title: str = Field(default="Library Catalog", description="Site title")
    host: str = Field(default="localhost", description="Application host")
    port: int = Field(default=8000, description="Application port")


class LoggingConfig(BaseModel):
    """Logging configuration model."""

    level: str = Field(default="INFO", description="Logging level")
    format: Literal["json", "plain"] = Field(default="plain", description="Log format")
    file: str | None = Field(default=None, description="Log file path")
    max_size_mb: int = Field(default=10, description="Maximum log file size in MB")
    backup_count: int = Field(
        default=5, description="Number of backup log files to keep"
    )


class DatabaseConfig(BaseModel):
    """Database configuration model."""

    url: str = Field(
        default="sqlite:///./catalog.db",
        description="Database connection URL",
    )
    pool_size: int = Field(default=20, description="Connection pool size")
    max_overflow: int = Field(default=10, description="Maximum pool overflow")
    pool_timeout: int = Field(default=30, description="Pool timeout in seconds")
    pool_recycle: int = Field(default=1800, description="Pool recycle time in seconds")
    echo: bool = Field(default=False, description="Echo SQL statements")

    @property
    def is_sqlite(self) -> bool:
        return self.url.startswith("sqlite")


class StorageConfig(BaseModel):
    """Filesystem storage for uploaded cover images."""

    public_dir: str = Field(
        default="public", description="Base directory for publicly served files"
    )
    cover_image_base_path: str = Field(
        default="uploads/bookCovers",
        description="Cover image directory, relative to public_dir",
    )
    allowed_mime_types: list[str] = Field(
        default_factory=lambda: list(DEFAULT_COVER_MIME_TYPES),
        description="Content types accepted for cover uploads",
    )

    @computed_field
    @property
    def upload_dir(self) -> str:
        """Directory that cover images are written to."""
        return str(Path(self.public_dir) / self.cover_image_base_path)

    @property
    def url_prefix(self) -> str:
        return "/" + self.cover_image_base_path.strip("/")


class CatalogConfig(BaseModel):
    """Behaviour of the book and author pages."""

    recent_books_limit: int = Field(
        default=10, description="Number of books shown on the index page"
    )
    author_books_limit: int = Field(
        default=6, description="Number of books shown on an author page"
    )
    preserve_cover_on_update: bool = Field(
        default=False,
        description="Keep the existing cover when an edit uploads no new file",
    )
    remove_cover_on_delete: bool = Field(
        default=False, description="Delete the cover file along with its book"
    )


class ConfigData(BaseModel):
    """Root configuration model that matches the config.yaml structure."""

    app: AppConfig = Field(
        default_factory=AppConfig, description="Application configuration"
    )
    logging: LoggingConfig = Field(
        default_factory=LoggingConfig, description="Logging configuration"
    )
    database: DatabaseConfig = Field(
        default_factory=DatabaseConfig, description="Database configuration"
    )
    storage: StorageConfig = Field(
        default_factory=StorageConfig, description="Cover image storage"
    )
    catalog: CatalogConfig = Field(
        default_factory=CatalogConfig, description="Catalog behaviour"
    )
