import os

from flask import Flask

from .config import settings
from .database import DatabaseConnections
from .services import DualWriteService

PACKAGE_ROOT = os.path.dirname(os.path.abspath(__file__))
DEFAULT_FORM_PAGE = os.path.join(PACKAGE_ROOT, "..", "static", "index.html")


def create_app(connections: DatabaseConnections, test_config=None):
    """Build the Flask app around already-bootstrapped database connections."""
    app = Flask(__name__, static_folder=None)

    form_page = settings.FORM_PAGE or DEFAULT_FORM_PAGE
    app.config.from_mapping(
        DEBUG=settings.DEBUG,
        FORM_PAGE=form_page,
    )

    if test_config:
        app.config.update(test_config)

    # send_from_directory resolves relative paths against the package, not the cwd
    app.config["FORM_PAGE"] = os.path.abspath(app.config["FORM_PAGE"])

    # attach to app for other modules to use
    app.extensions["db_connections"] = connections
    app.extensions["dual_write_service"] = DualWriteService(connections)

    from .routes import form_bp, register_error_handlers

    app.register_blueprint(form_bp)
    register_error_handlers(app)

    return app
