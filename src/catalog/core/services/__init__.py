from .cover_store import CoverImageStore
from .database.db_session import DbSessionService

__all__ = ["CoverImageStore", "DbSessionService"]
