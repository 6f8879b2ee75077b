"""Data-access layer for authors."""

from loguru import logger
from sqlalchemy import func
from sqlalchemy.exc import SQLAlchemyError
from sqlmodel import Session, select

from src.catalog.entities.core import StoreResult
from src.catalog.entities.service.author.entity import Author
from src.catalog.entities.service.author.table import AuthorTable


class AuthorHasBooksError(Exception):
    """Raised when deleting an author that books still reference."""

    def __init__(self, author_id: str, book_count: int):
        super().__init__(f"Author {author_id} still has {book_count} book(s)")
        self.author_id = author_id
        self.book_count = book_count


class AuthorRepository:
    """Data-access layer for authors."""

    def __init__(self, session: Session) -> None:
        self._session = session

    @staticmethod
    def _to_entity(row: AuthorTable) -> Author:
        return Author.model_validate(row, from_attributes=True)

    def _failed(self, operation: str, error: SQLAlchemyError, value=None):
        self._session.rollback()
        logger.bind(error_type=type(error).__name__).warning(
            "Author store {} failed: {}", operation, error
        )
        return StoreResult.failed(error, value)

    def list_all(self) -> StoreResult[list[Author]]:
        return self.search(None)

    def search(self, name: str | None) -> StoreResult[list[Author]]:
        """Authors whose name contains ``name`` case-insensitively."""
        statement = select(AuthorTable).order_by(AuthorTable.name)
        if name:
            statement = statement.where(
                func.lower(AuthorTable.name).contains(name.lower(), autoescape=True)
            )
        try:
            rows = self._session.exec(statement).all()
        except SQLAlchemyError as e:
            return self._failed("search", e)
        return StoreResult.ok([self._to_entity(row) for row in rows])

    def get(self, author_id: str) -> StoreResult[Author]:
        try:
            row = self._session.get(AuthorTable, author_id)
        except SQLAlchemyError as e:
            return self._failed("get", e)
        if row is None:
            return StoreResult.not_found()
        return StoreResult.ok(self._to_entity(row))

    def create(self, author: Author) -> StoreResult[Author]:
        row = AuthorTable(**author.model_dump())
        try:
            self._session.add(row)
            self._session.commit()
            self._session.refresh(row)
        except SQLAlchemyError as e:
            return self._failed("create", e)
        return StoreResult.ok(self._to_entity(row))

    def update(self, author: Author) -> StoreResult[Author]:
        try:
            row = self._session.get(AuthorTable, author.id)
            if row is None:
                return StoreResult.not_found()
            row.name = author.name
            self._session.add(row)
            self._session.commit()
            self._session.refresh(row)
        except SQLAlchemyError as e:
            return self._failed("update", e)
        return StoreResult.ok(self._to_entity(row))

    def delete(self, author_id: str) -> StoreResult[Author]:
        """Remove an author unless any book still references it."""
        from src.catalog.entities.service.book.table import BookTable

        try:
            row = self._session.get(AuthorTable, author_id)
            if row is None:
                return StoreResult.not_found()
            author = self._to_entity(row)
            book_count = self._session.exec(
                select(func.count())
                .select_from(BookTable)
                .where(BookTable.author_id == author_id)
            ).one()
            if book_count:
                logger.info("Refusing to delete author {} with books", author_id)
                return StoreResult.failed(
                    AuthorHasBooksError(author_id, book_count), author
                )
            self._session.delete(row)
            self._session.commit()
        except SQLAlchemyError as e:
            return self._failed("delete", e)
        return StoreResult.ok(author)
