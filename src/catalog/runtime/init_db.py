"""Database initialization script."""

from src.catalog.core.services import CoverImageStore, DbSessionService
from src.catalog.runtime.context import get_config


def init_db() -> None:
    """Create all tables and the cover upload directory."""
    config = get_config()
    DbSessionService(config).create_all()
    CoverImageStore.from_config(config.storage).ensure_directory()


if __name__ == "__main__":
    init_db()
