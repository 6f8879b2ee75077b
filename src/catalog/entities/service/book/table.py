"""Book database table model."""

from datetime import date

from sqlalchemy import CheckConstraint
from sqlmodel import Field

from src.catalog.entities.core import EntityTable


class BookTable(EntityTable, table=True):
    """Database persistence model for books.

    NOT NULL and CHECK constraints carry the required-field rules, so an
    incomplete submission fails at write time like any other store error.
    """

    __tablename__ = "books"
    __table_args__ = (
        CheckConstraint("title <> ''", name="ck_books_title_required"),
        CheckConstraint("page_count >= 0", name="ck_books_page_count_non_negative"),
    )

    title: str = Field(default="", index=True)
    author_id: str | None = Field(default=None, index=True)
    publish_date: date | None = Field(default=None, nullable=False, index=True)
    page_count: int | None = Field(default=None, nullable=False)
    cover_image_name: str | None = None
    description: str | None = None
