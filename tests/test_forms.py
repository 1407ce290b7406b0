import pytest

from dualform.exceptions import FormParseError
from dualform.validation import parse_urlencoded, submission_schema


def test_parse_pairs_and_repeated_keys():
    form = parse_urlencoded("name=Alice&name=Other&email=a%40x.com&flag")
    assert form.getlist("name") == ["Alice", "Other"]
    assert form["email"] == "a@x.com"
    assert form["flag"] == ""


def test_parse_skips_empty_pairs():
    assert list(parse_urlencoded("&&name=A&").items(multi=True)) == [("name", "A")]


@pytest.mark.parametrize("body", ["name=%zz", "name=%4", "na%me=x", "a=1;b=2"])
def test_parse_rejects_malformed(body):
    with pytest.raises(FormParseError):
        parse_urlencoded(body)


def test_schema_defaults_missing_fields_and_drops_unknown():
    data = submission_schema.load({"name": "Alice", "extra": "ignored"})
    assert data == {"name": "Alice", "email": "", "phone": ""}


def test_parse_rejects_escape_that_is_not_utf8():
    with pytest.raises(FormParseError):
        parse_urlencoded("name=%FF")


def test_parse_decodes_multibyte_escape():
    assert parse_urlencoded("name=Jos%C3%A9")["name"] == "José"
