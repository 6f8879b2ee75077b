"""FastAPI dependency implementations."""

from __future__ import annotations

from collections.abc import Iterator

from fastapi import Depends, Request
from sqlmodel import Session

from src.catalog.api.http.app_data import ApplicationDependencies
from src.catalog.api.http.views import ViewRenderer
from src.catalog.core.services import CoverImageStore, DbSessionService
from src.catalog.entities.service.author import AuthorRepository
from src.catalog.entities.service.book import BookRepository
from src.catalog.runtime.config.config_data import CatalogConfig
from src.catalog.runtime.context import get_config


def get_db_session(request: Request) -> Iterator[Session]:
    """Yield a database session for the duration of one request."""
    app_deps: ApplicationDependencies = request.app.state.app_dependencies
    session = app_deps.database_service.get_session()
    try:
        yield session
    finally:
        session.close()


def get_database_service(request: Request) -> DbSessionService:
    app_deps: ApplicationDependencies = request.app.state.app_dependencies
    return app_deps.database_service


def get_cover_store(request: Request) -> CoverImageStore:
    """Get the cover image store instance."""
    app_deps: ApplicationDependencies = request.app.state.app_dependencies
    return app_deps.cover_store


def get_catalog_settings() -> CatalogConfig:
    return get_config().catalog


def get_book_repository(session: Session = Depends(get_db_session)) -> BookRepository:
    return BookRepository(session)


def get_author_repository(
    session: Session = Depends(get_db_session),
) -> AuthorRepository:
    return AuthorRepository(session)


def get_view(
    request: Request, covers: CoverImageStore = Depends(get_cover_store)
) -> ViewRenderer:
    return ViewRenderer(request, covers)
