"""Database bootstrap.

Opens one SQLAlchemy engine per database target, verifies each with a ping
and makes sure the ``users`` table exists in both. The resulting
``DatabaseConnections`` container is created once at startup and handed to
the Flask app factory.
"""

import logging
from typing import Iterator

from sqlalchemy import create_engine, text
from sqlalchemy.engine import URL, Engine
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, sessionmaker

from dualform.config import DatabaseSettings, DatabaseTargets
from dualform.exceptions import DatabaseConnectionError, SchemaCreationError
from dualform.models import Base

logger = logging.getLogger(__name__)


def build_url(db_settings: DatabaseSettings) -> URL:
    """Assemble the connection URL for a target.

    ``sslmode`` is not part of the URL; it is passed to libpq as a connect
    argument by ``open_target``.
    """
    return URL.create(
        "postgresql+psycopg2",
        username=db_settings.user,
        password=db_settings.password,
        host=db_settings.host,
        port=db_settings.port,
        database=db_settings.name,
    )


class DatabaseTarget:
    """A named database with its engine and session factory."""

    def __init__(self, prefix: str, engine: Engine):
        """Initialize target.

        Args:
            prefix: Environment prefix naming the target (e.g. ``RDS_DB``)
            engine: SQLAlchemy engine bound to the target database
        """
        self.prefix = prefix
        self.engine = engine
        self.session_factory = sessionmaker(
            autocommit=False, autoflush=False, expire_on_commit=False, bind=engine
        )

    def session(self) -> Session:
        return self.session_factory()

    def ping(self) -> None:
        """Check connectivity with a trivial query.

        Raises:
            DatabaseConnectionError: If the database cannot be reached
        """
        try:
            with self.engine.connect() as conn:
                conn.execute(text("SELECT 1"))
        except SQLAlchemyError as e:
            raise DatabaseConnectionError(
                self.prefix, f"Failed to connect to {self.prefix} DB: {e}"
            )

    def ensure_schema(self) -> None:
        """Create the users table if it does not exist.

        Raises:
            SchemaCreationError: If the table cannot be created
        """
        try:
            Base.metadata.create_all(bind=self.engine)
        except SQLAlchemyError as e:
            raise SchemaCreationError(self.prefix, f"Failed to create table: {e}")

    def dispose(self) -> None:
        self.engine.dispose()

    def __repr__(self) -> str:  # pragma: no cover - trivial
        return f"<DatabaseTarget prefix={self.prefix} url={self.engine.url!r}>"


class DatabaseConnections:
    """Container for the primary and secondary targets."""

    def __init__(self, primary: DatabaseTarget, secondary: DatabaseTarget):
        self.primary = primary
        self.secondary = secondary

    def __iter__(self) -> Iterator[DatabaseTarget]:
        return iter((self.primary, self.secondary))

    def dispose(self) -> None:
        for target in self:
            target.dispose()


def open_target(db_settings: DatabaseSettings, echo: bool = False) -> DatabaseTarget:
    """Open an engine for one target and verify it answers.

    Args:
        db_settings: Connection parameters
        echo: Log SQL statements

    Returns:
        Connected DatabaseTarget

    Raises:
        DatabaseConnectionError: If the engine cannot be created or pinged
    """
    url = build_url(db_settings)
    try:
        engine = create_engine(
            url,
            connect_args={"sslmode": db_settings.sslmode},
            pool_pre_ping=True,
            echo=echo,
        )
    except (SQLAlchemyError, ImportError) as e:
        raise DatabaseConnectionError(
            db_settings.prefix, f"Failed to open {db_settings.prefix} DB: {e}"
        )

    target = DatabaseTarget(db_settings.prefix, engine)
    logger.debug(f"Pinging {db_settings.prefix} at {url.render_as_string(hide_password=True)}")
    try:
        target.ping()
    except DatabaseConnectionError:
        target.dispose()
        raise

    logger.info(f"Connected to {db_settings.prefix} database successfully")
    return target


def bootstrap(targets: DatabaseTargets, echo: bool = False) -> DatabaseConnections:
    """Connect both targets, then ensure the users table in each.

    Args:
        targets: Settings for the primary and secondary databases
        echo: Log SQL statements

    Returns:
        DatabaseConnections with both targets ready for writes

    Raises:
        DatabaseConnectionError: If a target cannot be reached
        SchemaCreationError: If the users table cannot be created
    """
    primary = open_target(targets.primary, echo=echo)
    try:
        secondary = open_target(targets.secondary, echo=echo)
    except DatabaseConnectionError:
        primary.dispose()
        raise

    connections = DatabaseConnections(primary, secondary)
    try:
        for target in connections:
            target.ensure_schema()
    except SchemaCreationError:
        connections.dispose()
        raise

    return connections
