"""Entity package: Author."""

from .entity import Author
from .repository import AuthorHasBooksError, AuthorRepository
from .table import AuthorTable

__all__ = ["Author", "AuthorHasBooksError", "AuthorRepository", "AuthorTable"]
