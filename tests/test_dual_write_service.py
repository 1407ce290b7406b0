import pytest

from dualform.exceptions import PrimaryWriteError, SecondaryWriteError
from dualform.models import Base, User
from dualform.repositories import UserRepository
from dualform.services import DualWriteService

from conftest import stored_rows


def test_store_returns_independent_ids(connections):
    # advance the secondary sequence so the ids differ
    service = DualWriteService(connections)
    with connections.secondary.session() as db:
        UserRepository(db).create_user("seed", "seed", "seed")

    result = service.store("Alice", "a@x.com", "555")
    assert result.primary_id == 1
    assert result.secondary_id == 2


def test_primary_failure_skips_secondary(connections):
    Base.metadata.drop_all(bind=connections.primary.engine)

    with pytest.raises(PrimaryWriteError) as exc:
        DualWriteService(connections).store("Alice", "a@x.com", "555")
    assert exc.value.target == "RDS_DB"
    assert exc.value.message == "Failed to store data in RDS"
    assert stored_rows(connections.secondary) == []


def test_secondary_failure_leaves_primary_row(connections):
    Base.metadata.drop_all(bind=connections.secondary.engine)

    with pytest.raises(SecondaryWriteError) as exc:
        DualWriteService(connections).store("Alice", "a@x.com", "555")
    assert exc.value.target == "LOCAL_DB"
    assert stored_rows(connections.primary) == [("Alice", "a@x.com", "555")]


def test_created_at_is_assigned(connections):
    DualWriteService(connections).store("Alice", "a@x.com", "555")
    for target in connections:
        with target.session() as db:
            user = db.query(User).one()
            assert user.created_at is not None
