"""Entities organized by business concept.

Each entity package holds:
- entity.py: Domain model
- table.py: Database persistence model
- repository.py: Data access layer returning ``StoreResult`` values
"""

from .service.author import Author, AuthorRepository, AuthorTable
from .service.book import Book, BookRepository, BookTable

__all__ = [
    "Author",
    "AuthorRepository",
    "AuthorTable",
    "Book",
    "BookRepository",
    "BookTable",
]
