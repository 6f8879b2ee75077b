from dataclasses import dataclass

from src.catalog.core.services import CoverImageStore, DbSessionService


@dataclass
class ApplicationDependencies:
    database_service: DbSessionService
    cover_store: CoverImageStore
