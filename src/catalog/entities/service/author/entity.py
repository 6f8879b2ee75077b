"""Entity: Author."""

from typing import Any

from pydantic import Field

from src.catalog.entities.core import Entity


class Author(Entity):
    """Author of one or more books in the catalog.

    Books reference authors by identifier; an author never owns its books.
    """

    name: str = Field(default="", description="Author's display name")

    def __eq__(self, other: Any) -> bool:
        """Compare authors by business attributes, ignoring timestamps."""
        if not isinstance(other, Author):
            return False
        return self.id == other.id and self.name == other.name

    def __hash__(self) -> int:
        return hash((self.id, self.name))
