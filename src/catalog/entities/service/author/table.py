"""Author database table model."""

from sqlalchemy import CheckConstraint

from src.catalog.entities.core import EntityTable


class AuthorTable(EntityTable, table=True):
    """Database persistence model for authors."""

    __tablename__ = "authors"
    __table_args__ = (CheckConstraint("name <> ''", name="ck_authors_name_required"),)

    name: str = ""
