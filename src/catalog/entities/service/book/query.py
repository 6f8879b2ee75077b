"""Search filters for the book list.

A search starts unconstrained; each optional parameter that is present adds
one clause. The clauses are combined into a single ``WHERE`` by the repository.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from dataclasses import dataclass
from datetime import date, datetime

from sqlalchemy import func
from sqlalchemy.sql.elements import ColumnElement

from src.catalog.entities.service.book.table import BookTable


class InvalidSearchError(ValueError):
    """A search parameter could not be turned into a filter."""


@dataclass(frozen=True)
class BookSearch:
    """Optional filters taken from the list page's query string."""

    title: str | None = None
    published_before: str | None = None
    published_after: str | None = None

    @classmethod
    def from_query(cls, params: Mapping[str, str]) -> BookSearch:
        return cls(
            title=params.get("title"),
            published_before=params.get("publishedBefore"),
            published_after=params.get("publishedAfter"),
        )

    def as_form_values(self) -> dict[str, str]:
        """Values to echo back into the search form."""
        return {
            "title": self.title or "",
            "publishedBefore": self.published_before or "",
            "publishedAfter": self.published_after or "",
        }


def parse_date(value: str) -> date:
    """Parse an ISO date or datetime string into a calendar date."""
    text = value.strip()
    try:
        return date.fromisoformat(text)
    except ValueError:
        pass
    try:
        return datetime.fromisoformat(text).date()
    except ValueError as e:
        raise InvalidSearchError(f"Invalid date: {value!r}") from e


def _title_contains(value: str) -> ColumnElement[bool]:
    return func.lower(BookTable.title).contains(value.lower(), autoescape=True)


def _published_on_or_before(value: str) -> ColumnElement[bool]:
    return BookTable.publish_date <= parse_date(value)


def _published_on_or_after(value: str) -> ColumnElement[bool]:
    return BookTable.publish_date >= parse_date(value)


_FILTERS: list[tuple[str, Callable[[str], ColumnElement[bool]]]] = [
    ("title", _title_contains),
    ("published_before", _published_on_or_before),
    ("published_after", _published_on_or_after),
]


def build_book_filters(search: BookSearch) -> list[ColumnElement[bool]]:
    """Clauses for every filter whose parameter is present and non-empty.

    Raises:
        InvalidSearchError: If a date parameter cannot be parsed.
    """
    clauses = []
    for attribute, predicate in _FILTERS:
        value = getattr(search, attribute)
        if value is not None and value != "":
            clauses.append(predicate(value))
    return clauses
