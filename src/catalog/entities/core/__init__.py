from ._base import Entity, EntityTable
from .result import StoreOutcome, StoreResult

__all__ = ["Entity", "EntityTable", "StoreOutcome", "StoreResult"]
