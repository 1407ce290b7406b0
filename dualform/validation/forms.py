"""Strict decoding of URL-encoded form data.

Werkzeug's form parser silently keeps malformed escapes; submissions with a
broken body must be rejected instead, so the body and query string are decoded
here and any malformed pair raises ``FormParseError``.
"""

import re
from typing import Dict
from urllib.parse import unquote_plus

from flask import Request
from werkzeug.datastructures import MultiDict

from dualform.exceptions import FormParseError

FORM_URLENCODED = "application/x-www-form-urlencoded"
MULTIPART = "multipart/form-data"

# Largest accepted URL-encoded body
MAX_FORM_BYTES = 10 << 20

_BAD_ESCAPE = re.compile(r"%(?![0-9A-Fa-f]{2})")


def _unescape(component: str) -> str:
    match = _BAD_ESCAPE.search(component)
    if match:
        raise FormParseError(f"invalid URL escape {component[match.start():match.start() + 3]!r}")
    try:
        return unquote_plus(component, errors="strict")
    except UnicodeDecodeError:
        raise FormParseError(f"invalid UTF-8 in form value {component!r}")


def _decode(raw: bytes) -> str:
    try:
        return raw.decode("utf-8")
    except UnicodeDecodeError:
        raise FormParseError("form data is not valid UTF-8")


def _read_bounded(stream, limit: int) -> bytes:
    """Read at most ``limit`` bytes; chunked bodies carry no Content-Length."""
    chunks = []
    remaining = limit
    while remaining > 0:
        chunk = stream.read(remaining)
        if not chunk:
            break
        chunks.append(chunk)
        remaining -= len(chunk)
    return b"".join(chunks)


def parse_urlencoded(data: str) -> MultiDict:
    """Decode ``key=value&key=value`` pairs.

    Empty pairs are skipped and a pair without ``=`` yields an empty value.

    Raises:
        FormParseError: On a ``;`` separator, an invalid percent escape or
            an escape that does not decode as UTF-8
    """
    result = MultiDict()
    for pair in data.split("&"):
        if not pair:
            continue
        if ";" in pair:
            raise FormParseError("invalid semicolon separator in query")
        key, _, value = pair.partition("=")
        result.add(_unescape(key), _unescape(value))
    return result


def read_form(request: Request) -> Dict[str, str]:
    """Collect form values from the request body and query string.

    Body values come first, so a field present in both resolves to the body
    value. Only the first value of a repeated field is kept.

    Raises:
        FormParseError: If the body or the query string is malformed
    """
    values = MultiDict()

    if request.mimetype == FORM_URLENCODED:
        if request.content_length is not None and request.content_length > MAX_FORM_BYTES:
            raise FormParseError("http: POST too large")
        body = _read_bounded(request.stream, MAX_FORM_BYTES + 1)
        if len(body) > MAX_FORM_BYTES:
            raise FormParseError("http: POST too large")
        values.update(parse_urlencoded(_decode(body)))
    elif request.mimetype == MULTIPART:
        values.update(request.form)

    values.update(parse_urlencoded(_decode(request.query_string)))

    return {key: values.getlist(key)[0] for key in values.keys()}
