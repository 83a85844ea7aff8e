import pytest

from roster.errors import DraftValidationError, ErrorKind
from roster.schemas import Draft
from roster.services.validation import is_valid_email, validate_fields


@pytest.mark.parametrize("email", [
    "ann@example.com",
    "ann.lee@example.com",
    "a@b.c",
    "first+tag@sub.domain.org",
    "  padded@example.com  ",
])
def test_valid_emails(email):
    assert is_valid_email(email)


@pytest.mark.parametrize("email", [
    "not-an-email",
    "ann@example",
    "@example.com",
    "ann@.com",
    "ann@@example.com",
    "ann lee@example.com",
    "ann@exa mple.com",
    "ann@example.",
    "a@b.c@d",
])
def test_invalid_emails(email):
    assert not is_valid_email(email)


@pytest.mark.parametrize("fields", [
    {"name": "", "email": "ann@example.com", "id_number": "1"},
    {"name": "Ann", "email": "   ", "id_number": "1"},
    {"name": "Ann", "email": "ann@example.com", "id_number": "\t"},
    {},
])
def test_missing_fields(fields):
    with pytest.raises(DraftValidationError) as exc_info:
        validate_fields(Draft(**fields))
    assert exc_info.value.kind is ErrorKind.MISSING_FIELDS
    assert exc_info.value.message == "All fields are required."


def test_invalid_email_reported():
    with pytest.raises(DraftValidationError) as exc_info:
        validate_fields(Draft(name="Ann", email="nope", id_number="1"))
    assert exc_info.value.kind is ErrorKind.INVALID_EMAIL
    assert exc_info.value.message == "Invalid email format."


def test_missing_fields_checked_before_email():
    # bad email and an empty name: only the first rule is reported
    with pytest.raises(DraftValidationError) as exc_info:
        validate_fields(Draft(name=" ", email="nope", id_number="1"))
    assert exc_info.value.kind is ErrorKind.MISSING_FIELDS


def test_padded_values_pass_the_checks():
    validate_fields(Draft(name="  Ann Lee ", email=" ann@example.com", id_number=" 123 "))
