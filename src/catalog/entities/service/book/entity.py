"""Entity: Book."""

from datetime import date
from typing import Any

from pydantic import Field

from src.catalog.entities.core import Entity
from src.catalog.entities.service.author.entity import Author


class Book(Entity):
    """Book entity representing a catalog entry.

    The entity itself is permissive so an unsaved submission can be carried
    back to the form unchanged; required fields are enforced by the store.
    ``author`` is only filled in when the author reference has been resolved.
    """

    title: str = Field(default="", description="Title")
    author_id: str | None = Field(default=None, description="Referenced author id")
    publish_date: date | None = Field(default=None, description="Publication date")
    page_count: int | None = Field(default=None, description="Number of pages")
    cover_image_name: str | None = Field(
        default=None, description="Generated name of the stored cover image"
    )
    description: str | None = Field(default=None, description="Free text")
    author: Author | None = Field(default=None, exclude=True)

    def __eq__(self, other: Any) -> bool:
        """Compare books by business attributes, ignoring timestamps."""
        if not isinstance(other, Book):
            return False

        return (
            self.id == other.id
            and self.title == other.title
            and self.author_id == other.author_id
            and self.publish_date == other.publish_date
            and self.page_count == other.page_count
            and self.cover_image_name == other.cover_image_name
            and self.description == other.description
        )

    def __hash__(self) -> int:
        return hash((self.id, self.title, self.author_id, self.publish_date))
