"""Application-level behaviour: index page, middleware, health."""

import pytest
from fastapi import status

from src.catalog.core.services import DbSessionService
from src.catalog.entities.core import StoreResult
from src.catalog.entities.service.book import BookRepository
from src.catalog.runtime.config.config_data import ConfigData


class TestIndex:
    def test_shows_recent_books(self, client, make_book):
        make_book("Older")
        make_book("Newer")

        response = client.get("/")

        assert response.status_code == status.HTTP_200_OK
        assert response.text.index("Newer") < response.text.index("Older")

    def test_limit_comes_from_settings(self, client, catalog_settings, make_book):
        catalog_settings.recent_books_limit = 1
        make_book("Older")
        make_book("Newer")

        response = client.get("/")

        assert "Newer" in response.text
        assert "Older" not in response.text

    def test_store_failure_renders_empty_page(self, client, monkeypatch):
        monkeypatch.setattr(
            BookRepository,
            "recent",
            lambda self, limit: StoreResult.failed(RuntimeError("down")),
        )

        response = client.get("/")

        assert response.status_code == status.HTTP_200_OK
        assert "No books found." in response.text


class TestMiddleware:
    def test_security_headers(self, client):
        response = client.get("/health")

        assert response.json() == {"status": "healthy"}
        assert response.headers["X-Content-Type-Options"] == "nosniff"
        assert response.headers["X-Frame-Options"] == "DENY"

    def test_request_id_is_echoed(self, client):
        response = client.get("/health", headers={"X-Request-ID": "req-123"})

        assert response.headers["X-Request-ID"] == "req-123"

    def test_request_id_is_generated(self, client):
        assert client.get("/health").headers["X-Request-ID"]

    def test_unknown_override_method_is_ignored(self, client):
        # POST /books?_method=TRACE stays a POST and creates nothing
        response = client.post("/books?_method=TRACE", data={"title": ""})

        assert response.status_code == status.HTTP_200_OK
        assert "Error creating book" in response.text


class TestReadiness:
    @pytest.fixture
    def database_service(self, client, tmp_path):
        from src.catalog.api.http.app import app
        from src.catalog.api.http.deps import get_database_service

        config = ConfigData()
        config.database.url = f"sqlite:///{tmp_path / 'catalog.db'}"
        service = DbSessionService(config)
        app.dependency_overrides[get_database_service] = lambda: service
        try:
            yield service
        finally:
            service.dispose()

    def test_ready_when_database_answers(self, client, database_service):
        response = client.get("/health/ready")

        assert response.status_code == status.HTTP_200_OK
        assert response.json() == {
            "status": "ready",
            "checks": {"database": "healthy"},
        }

    def test_unavailable_when_database_fails(
        self, client, database_service, monkeypatch
    ):
        monkeypatch.setattr(database_service, "health_check", lambda: False)

        response = client.get("/health/ready")

        assert response.status_code == status.HTTP_503_SERVICE_UNAVAILABLE
        assert response.json()["checks"] == {"database": "unhealthy"}
