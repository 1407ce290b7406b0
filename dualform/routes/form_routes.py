"""Form page and dual-write submission routes.

Both handlers accept every method at the routing layer and check the method
themselves, so ``GET /submit`` is answered with 405 instead of falling through
to the catch-all form route.
"""

import logging
import os

from flask import Blueprint, Flask, Response, current_app, request, send_from_directory

from dualform.exceptions import DualWriteError, FormParseError
from dualform.routes.decorators import log_request
from dualform.validation import read_form, submission_schema

bp = Blueprint("form", __name__)
logger = logging.getLogger(__name__)

ALL_METHODS = ["GET", "HEAD", "POST", "PUT", "PATCH", "DELETE", "OPTIONS"]

SUCCESS_MESSAGE = "User data stored in both databases successfully"


def plain_text_error(message: str, status: int) -> Response:
    """Plain-text error response with a trailing newline."""
    response = Response(f"{message}\n", status=status, mimetype="text/plain")
    response.headers["X-Content-Type-Options"] = "nosniff"
    return response


@bp.route("/", methods=ALL_METHODS, provide_automatic_options=False)
@bp.route("/<path:subpath>", methods=ALL_METHODS, provide_automatic_options=False)
@log_request()
def form_page(subpath=None):
    """Serve the static form page."""
    if request.method != "GET":
        return plain_text_error("Method not allowed", 405)

    directory, filename = os.path.split(current_app.config["FORM_PAGE"])
    try:
        return send_from_directory(directory, filename)
    except PermissionError as e:
        logger.error(f"Form page not readable: {e}")
        return plain_text_error("403 Forbidden", 403)


@bp.route("/submit", methods=ALL_METHODS, provide_automatic_options=False)
@log_request()
def submit():
    """Store submitted name, email and phone in both databases."""
    if request.method != "POST":
        return plain_text_error("Method not allowed", 405)

    try:
        form = read_form(request)
    except FormParseError as e:
        logger.warning(f"Rejected form from {request.remote_addr}: {e}")
        return plain_text_error("Failed to parse form", 400)

    data = submission_schema.load(form)
    service = current_app.extensions["dual_write_service"]

    try:
        service.store(data["name"], data["email"], data["phone"])
    except DualWriteError as e:
        return plain_text_error(e.message, 500)

    logger.info(f"Stored user data in BOTH databases: {data['name']} {data['email']} {data['phone']}")
    return Response(SUCCESS_MESSAGE, status=200, mimetype="text/plain")


def register_error_handlers(app: Flask) -> None:
    """Render framework HTTP errors as plain text."""

    @app.errorhandler(400)
    def bad_request(error):
        return plain_text_error("400 Bad Request", 400)

    @app.errorhandler(404)
    def not_found(error):
        return plain_text_error("404 page not found", 404)

    @app.errorhandler(405)
    def method_not_allowed(error):
        return plain_text_error("Method not allowed", 405)

    @app.errorhandler(500)
    def internal_error(error):
        logger.error(f"Internal server error: {error}")
        return plain_text_error("Internal Server Error", 500)
