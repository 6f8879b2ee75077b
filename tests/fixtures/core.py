from __future__ import annotations

from collections.abc import Callable, Generator
from datetime import date

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import StaticPool
from sqlmodel import Session, SQLModel, create_engine

from src.catalog.core.services import CoverImageStore
from src.catalog.core.services.database.db_session import register_sqlite_functions
from src.catalog.runtime.config.config_data import DEFAULT_COVER_MIME_TYPES, CatalogConfig

__all__ = [
    "engine",
    "session",
    "cover_store",
    "catalog_settings",
    "client",
    "make_author",
    "make_book",
]


@pytest.fixture
def engine():
    """A fresh in-memory SQLite engine with the catalog tables."""
    engine = create_engine(
        "sqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    register_sqlite_functions(engine)

    # Import models to register them with the metadata
    from src.catalog.entities.service.author import AuthorTable  # noqa: F401
    from src.catalog.entities.service.book import BookTable  # noqa: F401

    SQLModel.metadata.create_all(engine)
    try:
        yield engine
    finally:
        engine.dispose()


@pytest.fixture
def session(engine) -> Generator[Session]:
    """Create a fresh database session for testing."""
    with Session(engine) as session:
        yield session


@pytest.fixture
def cover_store(tmp_path) -> CoverImageStore:
    return CoverImageStore(
        upload_dir=tmp_path / "public" / "uploads" / "bookCovers",
        url_prefix="/uploads/bookCovers",
        allowed_mime_types=DEFAULT_COVER_MIME_TYPES,
    )


@pytest.fixture
def catalog_settings() -> CatalogConfig:
    return CatalogConfig()


@pytest.fixture
def client(
    session: Session, cover_store: CoverImageStore, catalog_settings: CatalogConfig
) -> Generator[TestClient]:
    """TestClient wired to the test session, cover store and catalog settings.

    Redirects are not followed so tests can assert on them.
    """
    from src.catalog.api.http.app import app
    from src.catalog.api.http.deps import (
        get_catalog_settings,
        get_cover_store,
        get_db_session,
    )

    def override_get_session():
        yield session

    app.dependency_overrides[get_db_session] = override_get_session
    app.dependency_overrides[get_cover_store] = lambda: cover_store
    app.dependency_overrides[get_catalog_settings] = lambda: catalog_settings
    try:
        yield TestClient(app, follow_redirects=False)
    finally:
        app.dependency_overrides.clear()


@pytest.fixture
def make_author(session: Session) -> Callable[..., object]:
    from src.catalog.entities.service.author import Author, AuthorRepository

    def _make(name: str = "Ursula K. Le Guin") -> Author:
        result = AuthorRepository(session).create(Author(name=name))
        assert result.is_ok, result.error
        return result.value

    return _make


@pytest.fixture
def make_book(session: Session) -> Callable[..., object]:
    from src.catalog.entities.service.book import Book, BookRepository

    def _make(
        title: str = "The Dispossessed",
        publish_date: date = date(1974, 5, 1),
        page_count: int = 387,
        **fields,
    ) -> Book:
        book = Book(
            title=title, publish_date=publish_date, page_count=page_count, **fields
        )
        result = BookRepository(session).create(book)
        assert result.is_ok, result.error
        return result.value

    return _make
