"""Entity package: Book."""

from .entity import Book
from .query import BookSearch, InvalidSearchError, build_book_filters
from .repository import BookRepository
from .table import BookTable

__all__ = [
    "Book",
    "BookRepository",
    "BookSearch",
    "BookTable",
    "InvalidSearchError",
    "build_book_filters",
]
