"""Validation module for form input.

Provides strict URL-encoded form decoding and the Marshmallow schema for submissions.
"""

from .forms import MAX_FORM_BYTES, parse_urlencoded, read_form
from .schemas import SubmissionSchema, submission_schema

__all__ = [
    'MAX_FORM_BYTES', 'parse_urlencoded', 'read_form',
    'SubmissionSchema', 'submission_schema',
]
