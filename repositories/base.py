"""
Base repository interface for data access layer.
This follows the Repository pattern to separate business logic from data access.

Repositories never commit: they add, flush and execute statements inside the
caller's transaction so that one service operation is all-or-nothing.
"""

from typing import Generic, TypeVar, Optional, Type
from sqlalchemy.orm import Session
from abc import ABC

ModelType = TypeVar("ModelType")


class BaseRepository(Generic[ModelType], ABC):
    """
    Base repository providing common read and write operations.
    All repositories should inherit from this class.
    """

    def __init__(self, db: Session, model: Type[ModelType]):
        self.db = db
        self.model = model

    def get_by_id(self, entity_id: int) -> Optional[ModelType]:
        """Get entity by its integer primary key"""
        return self.db.get(self.model, entity_id)

    def count(self) -> int:
        return self.db.query(self.model).count()

    def add(self, entity: ModelType) -> ModelType:
        """Stage a new entity and flush it so generated ids are populated"""
        self.db.add(entity)
        self.db.flush()
        return entity

