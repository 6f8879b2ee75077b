"""Base models shared by every catalog entity and table."""

import uuid
from datetime import UTC, datetime

from pydantic import BaseModel, ConfigDict
from pydantic import Field as PydanticField
from sqlmodel import Field, SQLModel


def new_id() -> str:
    return str(uuid.uuid4())


def utc_now() -> datetime:
    return datetime.now(UTC)


class Entity(BaseModel):
    """Domain record with a store-assigned id and its timestamps.

    Entities are read straight off table rows, hence ``from_attributes``.
    """

    model_config = ConfigDict(from_attributes=True)

    id: str = PydanticField(default_factory=new_id)
    created_at: datetime = PydanticField(default_factory=utc_now)
    updated_at: datetime = PydanticField(default_factory=utc_now)


class EntityTable(SQLModel, table=False):
    """Columns every catalog table carries.

    ``created_at`` orders the book list and the recent-books page.
    """

    id: str = Field(default_factory=new_id, primary_key=True, max_length=36)
    created_at: datetime = Field(default_factory=utc_now, nullable=False, index=True)
    updated_at: datetime = Field(
        default_factory=utc_now,
        nullable=False,
        sa_column_kwargs={"onupdate": utc_now},
    )
