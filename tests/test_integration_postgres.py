import os

import pytest

from dualform import create_app
from dualform.config import load_settings
from dualform.database import bootstrap
from dualform.models import User

pytestmark = pytest.mark.skipif(
    not (os.environ.get("RDS_DB_HOST") and os.environ.get("LOCAL_DB_HOST")),
    reason="Integration test requires RDS_DB_* and LOCAL_DB_* env vars pointing to Postgres instances",
)


def test_submit_against_postgres():
    targets = load_settings().unwrap()
    connections = bootstrap(targets)
    try:
        email = f"integration-{os.getpid()}@example.com"
        client = create_app(connections, {"TESTING": True}).test_client()
        r = client.post(
            "/submit",
            data=f"name=Integration&email={email}&phone=555",
            content_type="application/x-www-form-urlencoded",
        )
        assert r.status_code == 200

        for target in connections:
            with target.session() as db:
                rows = db.query(User).filter(User.email == email).all()
                assert [(u.name, u.phone) for u in rows] == [("Integration", "555")]
                for u in rows:
                    db.delete(u)
                db.commit()
    finally:
        connections.dispose()
