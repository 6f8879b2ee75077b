"""Data-access layer for books."""

from loguru import logger
from sqlalchemy.exc import SQLAlchemyError
from sqlmodel import Session, select

from src.catalog.entities.core import StoreResult
from src.catalog.entities.service.author.entity import Author
from src.catalog.entities.service.author.table import AuthorTable
from src.catalog.entities.service.book.entity import Book
from src.catalog.entities.service.book.query import (
    BookSearch,
    InvalidSearchError,
    build_book_filters,
)
from src.catalog.entities.service.book.table import BookTable

_UPDATABLE_FIELDS = (
    "title",
    "author_id",
    "publish_date",
    "page_count",
    "cover_image_name",
    "description",
)


class BookRepository:
    """Data-access layer for books.

    Every operation is a single read or a single-record write and reports its
    outcome as a ``StoreResult``. Only store errors are caught here, including values the
    driver cannot bind.
    """

    def __init__(self, session: Session) -> None:
        self._session = session

    @staticmethod
    def _to_entity(row: BookTable) -> Book:
        return Book.model_validate(row, from_attributes=True)

    def _failed(self, operation: str, error: Exception, value=None):
        self._session.rollback()
        logger.bind(error_type=type(error).__name__).warning(
            "Book store {} failed: {}", operation, error
        )
        return StoreResult.failed(error, value)

    def search(self, search: BookSearch) -> StoreResult[list[Book]]:
        """All books matching every filter present in ``search``."""
        try:
            statement = (
                select(BookTable)
                .where(*build_book_filters(search))
                .order_by(BookTable.created_at)
            )
            rows = self._session.exec(statement).all()
        except (InvalidSearchError, SQLAlchemyError) as e:
            return self._failed("search", e)
        return StoreResult.ok([self._to_entity(row) for row in rows])

    def recent(self, limit: int) -> StoreResult[list[Book]]:
        statement = select(BookTable).order_by(BookTable.created_at.desc()).limit(limit)
        try:
            rows = self._session.exec(statement).all()
        except SQLAlchemyError as e:
            return self._failed("recent", e)
        return StoreResult.ok([self._to_entity(row) for row in rows])

    def list_by_author(self, author_id: str, limit: int) -> StoreResult[list[Book]]:
        statement = (
            select(BookTable)
            .where(BookTable.author_id == author_id)
            .order_by(BookTable.created_at.desc())
            .limit(limit)
        )
        try:
            rows = self._session.exec(statement).all()
        except SQLAlchemyError as e:
            return self._failed("list_by_author", e)
        return StoreResult.ok([self._to_entity(row) for row in rows])

    def get(self, book_id: str, populate_author: bool = False) -> StoreResult[Book]:
        """Look up one book, optionally resolving its author reference."""
        try:
            row = self._session.get(BookTable, book_id)
            if row is None:
                return StoreResult.not_found()
            book = self._to_entity(row)
            if populate_author and book.author_id:
                author_row = self._session.get(AuthorTable, book.author_id)
                if author_row is not None:
                    book.author = Author.model_validate(author_row, from_attributes=True)
        except SQLAlchemyError as e:
            return self._failed("get", e)
        return StoreResult.ok(book)

    def create(self, book: Book) -> StoreResult[Book]:
        row = BookTable(**book.model_dump())
        try:
            self._session.add(row)
            self._session.commit()
            self._session.refresh(row)
        except (SQLAlchemyError, OverflowError) as e:
            return self._failed("create", e)
        logger.info("Created book {}", row.id)
        return StoreResult.ok(self._to_entity(row))

    def update(self, book: Book) -> StoreResult[Book]:
        """Overwrite the stored fields of ``book`` with its current values."""
        try:
            row = self._session.get(BookTable, book.id)
            if row is None:
                return StoreResult.not_found()
            for field in _UPDATABLE_FIELDS:
                setattr(row, field, getattr(book, field))
            self._session.add(row)
            self._session.commit()
            self._session.refresh(row)
        except (SQLAlchemyError, OverflowError) as e:
            return self._failed("update", e)
        logger.info("Updated book {}", row.id)
        return StoreResult.ok(self._to_entity(row))

    def delete(self, book_id: str) -> StoreResult[Book]:
        """Find and remove a book in one unit of work.

        If the record was found but the removal could not be committed, the
        found book is returned along with the error.
        """
        found = None
        try:
            row = self._session.get(BookTable, book_id)
            if row is None:
                return StoreResult.not_found()
            found = self._to_entity(row)
            self._session.delete(row)
            self._session.commit()
        except SQLAlchemyError as e:
            return self._failed("delete", e, found)
        logger.info("Deleted book {}", book_id)
        return StoreResult.ok(found)
