"""Marshmallow schema for form submissions.

Fields are only extracted, never validated: a missing field loads as an empty
string and unknown fields are ignored.
"""

from marshmallow import EXCLUDE, Schema, fields


class SubmissionSchema(Schema):
    """Schema for the submit form."""

    class Meta:
        unknown = EXCLUDE

    name = fields.Str(load_default='')
    email = fields.Str(load_default='')
    phone = fields.Str(load_default='')


submission_schema = SubmissionSchema()
