"""Tests for the catalog command-line interface."""

from datetime import date

import pytest
from typer.testing import CliRunner

from src.catalog.cli import app
from src.catalog.core.services import DbSessionService
from src.catalog.entities.service.book import Book, BookRepository
from src.catalog.runtime.config.config_data import ConfigData
from src.catalog.runtime.context import get_config, with_context

runner = CliRunner()


@pytest.fixture
def cli_config(tmp_path):
    override = ConfigData()
    override.database.url = f"sqlite:///{tmp_path / 'catalog.db'}"
    override.storage.public_dir = str(tmp_path / "public")
    with with_context(override):
        yield get_config()


def test_init_db_creates_upload_directory(cli_config, tmp_path):
    result = runner.invoke(app, ["init-db"])

    assert result.exit_code == 0, result.output
    assert (tmp_path / "public" / "uploads" / "bookCovers").is_dir()
    assert "Database ready" in result.output


def test_add_author(cli_config):
    result = runner.invoke(app, ["add-author", "Ursula K. Le Guin"])

    assert result.exit_code == 0, result.output
    assert "Added author Ursula K. Le Guin" in result.output


def test_add_author_rejects_blank_name(cli_config):
    result = runner.invoke(app, ["add-author", "   "])

    assert result.exit_code == 1
    assert "Could not add author" in result.output


def test_list_books_filters_by_title(cli_config):
    service = DbSessionService(cli_config)
    service.create_all()
    with service.session_scope() as session:
        repository = BookRepository(session)
        repository.create(
            Book(title="Kindred", publish_date=date(1979, 6, 1), page_count=264)
        )
        repository.create(
            Book(title="Dawn", publish_date=date(1987, 5, 1), page_count=248)
        )
    service.dispose()

    result = runner.invoke(app, ["list-books", "--title", "kind"])

    assert result.exit_code == 0, result.output
    assert "Kindred" in result.output
    assert "Dawn" not in result.output


def test_list_books_rejects_bad_date(cli_config):
    DbSessionService(cli_config).create_all()

    result = runner.invoke(app, ["list-books", "--published-before", "someday"])

    assert result.exit_code == 1
    assert "Search failed" in result.output
