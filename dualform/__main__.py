"""Process entry point: load config, bootstrap both databases, serve on 8080.

Startup errors are logged and end the process with status 1 before the server
accepts any request.
"""

import logging
import sys

from dualform import create_app
from dualform.config import load_settings, settings
from dualform.database import bootstrap
from dualform.exceptions import StartupError
from dualform.logging_config import configure_logging

PORT = 8080

logger = logging.getLogger("dualform")


def main() -> int:
    configure_logging(settings.LOG_LEVEL, settings.LOG_FILE)

    result = load_settings()
    if not result.ok:
        logger.critical(str(result.error))
        return 1

    try:
        connections = bootstrap(result.targets, echo=settings.DEBUG)
    except StartupError as e:
        logger.critical(str(e))
        return 1

    app = create_app(connections)
    logger.info(f"Server started on port {PORT}")
    try:
        app.run(host="0.0.0.0", port=PORT, threaded=True, use_reloader=False)
    finally:
        connections.dispose()
    return 0


if __name__ == "__main__":
    sys.exit(main())
