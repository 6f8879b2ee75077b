"""Unit tests for the database session service."""

from sqlalchemy import func
from sqlmodel import select

from src.catalog.core.services import DbSessionService
from src.catalog.entities.service.author import AuthorTable
from src.catalog.runtime.config.config_data import ConfigData


def _config(url: str) -> ConfigData:
    config = ConfigData()
    config.database.url = url
    return config


class TestDbSessionService:
    def test_sqlite_engine_has_no_pool_sizing(self, tmp_path):
        service = DbSessionService(_config(f"sqlite:///{tmp_path / 'catalog.db'}"))
        try:
            assert service.engine.url.drivername == "sqlite"
            assert service.health_check() is True
        finally:
            service.dispose()

    def test_create_all_and_session_scope(self, tmp_path):
        service = DbSessionService(_config(f"sqlite:///{tmp_path / 'catalog.db'}"))
        try:
            service.create_all()
            with service.session_scope() as session:
                session.add(AuthorTable(name="Octavia E. Butler"))

            with service.session_scope() as session:
                names = session.exec(select(AuthorTable.name)).all()
            assert names == ["Octavia E. Butler"]
        finally:
            service.dispose()

    def test_sessions_keep_loaded_values_after_commit(self, tmp_path):
        service = DbSessionService(_config(f"sqlite:///{tmp_path / 'catalog.db'}"))
        try:
            service.create_all()
            session = service.get_session()
            row = AuthorTable(name="N. K. Jemisin")
            session.add(row)
            session.commit()
            session.close()

            assert row.name == "N. K. Jemisin"
        finally:
            service.dispose()

    def test_sqlite_lower_folds_non_ascii(self, tmp_path):
        service = DbSessionService(_config(f"sqlite:///{tmp_path / 'catalog.db'}"))
        try:
            with service.engine.connect() as connection:
                folded = connection.execute(select(func.lower("ÉLOGE"))).scalar_one()
            assert folded == "éloge"
        finally:
            service.dispose()
