"""User repository implementation."""

import logging

from sqlalchemy.orm import Session

from dualform.models import User

from .base import BaseRepository

logger = logging.getLogger(__name__)


class UserRepository(BaseRepository[User]):
    """Repository for submitted user records."""

    def __init__(self, db_session: Session):
        super().__init__(db_session, User)

    def create_user(self, name: str, email: str, phone: str) -> User:
        """Insert one user row; ``id`` and ``created_at`` are assigned by the database."""
        return self.create(name=name, email=email, phone=phone)
