"""Filesystem store for uploaded book cover images."""

from __future__ import annotations

import secrets
from collections.abc import Iterable
from pathlib import Path

from fastapi import UploadFile
from loguru import logger

from src.catalog.runtime.config.config_data import StorageConfig


class CoverImageStore:
    """Stores cover images under a single upload directory.

    Files are named with random hex tokens, never with anything the client
    sent. Uploads with a content type outside ``allowed_mime_types`` are
    dropped without error, and deletion is best-effort.
    """

    def __init__(
        self,
        upload_dir: Path | str,
        url_prefix: str,
        allowed_mime_types: Iterable[str],
    ) -> None:
        self.upload_dir = Path(upload_dir)
        self.url_prefix = "/" + url_prefix.strip("/")
        self.allowed_mime_types = frozenset(t.lower() for t in allowed_mime_types)

    @classmethod
    def from_config(cls, storage: StorageConfig) -> CoverImageStore:
        return cls(
            upload_dir=storage.upload_dir,
            url_prefix=storage.url_prefix,
            allowed_mime_types=storage.allowed_mime_types,
        )

    def ensure_directory(self) -> None:
        self.upload_dir.mkdir(parents=True, exist_ok=True)

    def accepts(self, mime_type: str | None) -> bool:
        return bool(mime_type) and mime_type.lower() in self.allowed_mime_types

    def path_for(self, file_name: str) -> Path:
        return self.upload_dir / Path(file_name).name

    def url_for(self, file_name: str | None) -> str | None:
        if not file_name:
            return None
        return f"{self.url_prefix}/{file_name}"

    def exists(self, file_name: str | None) -> bool:
        return bool(file_name) and self.path_for(file_name).is_file()

    def store(self, data: bytes, mime_type: str | None) -> str | None:
        """Write ``data`` under a generated name, or return None if rejected."""
        if not self.accepts(mime_type):
            logger.debug("Rejected cover upload with content type {}", mime_type)
            return None

        self.ensure_directory()
        file_name = secrets.token_hex(16)
        self.path_for(file_name).write_bytes(data)
        logger.info("Stored cover image {} ({} bytes)", file_name, len(data))
        return file_name

    def store_upload(self, upload: UploadFile | None) -> str | None:
        """Store a multipart file field; an empty field counts as no file."""
        if upload is None or not upload.filename:
            return None
        if not self.accepts(upload.content_type):
            logger.debug(
                "Rejected cover upload {} with content type {}",
                upload.filename,
                upload.content_type,
            )
            return None
        upload.file.seek(0)
        return self.store(upload.file.read(), upload.content_type)

    def delete(self, file_name: str | None) -> None:
        """Remove a stored cover. Failures are logged, never raised."""
        if not file_name:
            return
        try:
            self.path_for(file_name).unlink()
        except OSError as e:
            logger.bind(error_type=type(e).__name__).error(
                "Failed to remove cover image {}: {}", file_name, e
            )
        else:
            logger.info("Removed cover image {}", file_name)
