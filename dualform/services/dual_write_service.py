"""Sequential write of one submission to both databases.

The two inserts are independent transactions. When the secondary insert fails
the primary row stays in place and the databases diverge until reconciled by
hand; no compensation is attempted.
"""

import logging
from dataclasses import dataclass

from sqlalchemy.exc import SQLAlchemyError

from dualform.database import DatabaseConnections, DatabaseTarget
from dualform.exceptions import PrimaryWriteError, SecondaryWriteError
from dualform.repositories import UserRepository

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DualWriteResult:
    """Row ids assigned by each database (independent sequences)."""

    primary_id: int
    secondary_id: int


class DualWriteService:
    """Write submitted user data to the primary and then the secondary database."""

    def __init__(self, connections: DatabaseConnections):
        self.connections = connections

    def _insert(self, target: DatabaseTarget, name: str, email: str, phone: str) -> int:
        with target.session() as db:
            user = UserRepository(db).create_user(name=name, email=email, phone=phone)
            return user.id

    def store(self, name: str, email: str, phone: str) -> DualWriteResult:
        """Insert the record into both databases, primary first.

        Args:
            name: Submitted name
            email: Submitted email
            phone: Submitted phone

        Returns:
            DualWriteResult with the id from each database

        Raises:
            PrimaryWriteError: If the primary insert fails; the secondary is not touched
            SecondaryWriteError: If the secondary insert fails; the primary row is kept
        """
        primary = self.connections.primary
        secondary = self.connections.secondary

        try:
            primary_id = self._insert(primary, name, email, phone)
        except (SQLAlchemyError, ValueError) as e:
            logger.error(f"Insert into {primary.prefix} failed: {e}")
            raise PrimaryWriteError(primary.prefix, e)

        try:
            secondary_id = self._insert(secondary, name, email, phone)
        except (SQLAlchemyError, ValueError) as e:
            logger.error(
                f"Insert into {secondary.prefix} failed after {primary.prefix} "
                f"stored id {primary_id}; databases now differ: {e}"
            )
            raise SecondaryWriteError(secondary.prefix, e)

        return DualWriteResult(primary_id=primary_id, secondary_id=secondary_id)
