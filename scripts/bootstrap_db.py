"""Helper to bootstrap both databases without starting the server.

Usage (from repo root):
python3 scripts/bootstrap_db.py

Reads the RDS_DB_* and LOCAL_DB_* environment variables, connects to both
databases and creates the users table where it is missing.
"""

import os
import sys

# ensure repo root is on path
HERE = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
if HERE not in sys.path:
    sys.path.insert(0, HERE)

from dualform.config import load_settings, settings
from dualform.database import bootstrap
from dualform.exceptions import StartupError
from dualform.logging_config import configure_logging
from dualform.repositories import UserRepository


def main() -> int:
    configure_logging(settings.LOG_LEVEL, settings.LOG_FILE)
    result = load_settings()
    if not result.ok:
        print(result.error, file=sys.stderr)
        return 1

    try:
        connections = bootstrap(result.targets, echo=settings.DEBUG)
    except StartupError as e:
        print(e, file=sys.stderr)
        return 1

    try:
        for target in connections:
            with target.session() as db:
                print(f"{target.prefix}: users table ready, {UserRepository(db).count()} rows")
    finally:
        connections.dispose()
    return 0


if __name__ == "__main__":
    sys.exit(main())
