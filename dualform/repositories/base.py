"""Base repository implementation.

Provides common database operations and patterns for all repository classes.
"""

from abc import ABC
from typing import TypeVar, Generic
from sqlalchemy.orm import Session
from sqlalchemy.exc import SQLAlchemyError
import logging

logger = logging.getLogger(__name__)

# Generic type for model classes
ModelType = TypeVar('ModelType')


class BaseRepository(Generic[ModelType], ABC):
    """Base repository class with insert and count operations."""

    def __init__(self, db_session: Session, model_class: type):
        """Initialize repository with database session and model class.

        Args:
            db_session: SQLAlchemy database session
            model_class: SQLAlchemy model class
        """
        self.db = db_session
        self.model_class = model_class

    def create(self, **kwargs) -> ModelType:
        """Create a new record.

        Args:
            **kwargs: Field values for the new record

        Returns:
            Created model instance

        Raises:
            SQLAlchemyError: If the insert or commit fails
            ValueError: If the driver rejects a value before sending it
        """
        try:
            instance = self.model_class(**kwargs)
            self.db.add(instance)
            self.db.flush()
            new_id = instance.id
            self.db.commit()
            logger.debug(f"Created {self.model_class.__name__} with id {new_id}")
            return instance
        except (SQLAlchemyError, ValueError) as e:
            self.db.rollback()
            logger.error(f"Failed to create {self.model_class.__name__}: {e}")
            raise

    def count(self, **filters) -> int:
        """Count records matching filters.

        Args:
            **filters: Filter criteria

        Returns:
            Number of matching records
        """
        query = self.db.query(self.model_class)
        for field, value in filters.items():
            if hasattr(self.model_class, field):
                query = query.filter(getattr(self.model_class, field) == value)
        return query.count()
