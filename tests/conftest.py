import os
import sys

import pytest
from sqlalchemy import create_engine
from sqlalchemy.pool import StaticPool

# Ensure repo root is on sys.path so tests can import the dualform package
REPO_ROOT = os.path.dirname(os.path.dirname(__file__))
if REPO_ROOT not in sys.path:
    sys.path.insert(0, REPO_ROOT)

from dualform import create_app
from dualform.database import DatabaseConnections, DatabaseTarget
from dualform.models import User


def make_sqlite_target(prefix):
    # one shared in-memory database per target
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    target = DatabaseTarget(prefix, engine)
    target.ensure_schema()
    return target


def stored_rows(target):
    with target.session() as db:
        return [(u.name, u.email, u.phone) for u in db.query(User).order_by(User.id).all()]


@pytest.fixture
def connections():
    conns = DatabaseConnections(make_sqlite_target("RDS_DB"), make_sqlite_target("LOCAL_DB"))
    try:
        yield conns
    finally:
        conns.dispose()


@pytest.fixture
def app(connections):
    return create_app(connections, {"TESTING": True})


@pytest.fixture
def client(app):
    with app.test_client() as client:
        yield client
