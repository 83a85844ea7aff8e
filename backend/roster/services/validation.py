"""
Field validation shared by the create and edit paths.

Rules, checked in order, first failure wins:
1. name, email and id_number are non-empty after trimming
2. the trimmed email looks like local@domain.tld
"""

import re

from roster.errors import (
    DraftValidationError, ErrorKind,
    MISSING_FIELDS_MESSAGE, INVALID_EMAIL_MESSAGE
)

REQUIRED_FIELDS = ("name", "email", "id_number")

# local part, domain and tail without whitespace or '@', dot-separated
EMAIL_PATTERN = re.compile(r"[^\s@]+@[^\s@]+\.[^\s@]+")



def is_valid_email(email: str) -> bool:
    return EMAIL_PATTERN.fullmatch(email.strip()) is not None


def validate_fields(fields):
    """
    Validate a candidate set of student fields.

    Trimming is only used for the checks; the values themselves are
    left as entered.

    Args:
        fields: Any object with name, email and id_number string attributes
            (a Draft, StudentFields or StudentRecord)

    Raises:
        DraftValidationError: MISSING_FIELDS or INVALID_EMAIL
    """
    trimmed = {name: (getattr(fields, name) or "").strip() for name in REQUIRED_FIELDS}

    if not all(trimmed.values()):
        raise DraftValidationError(ErrorKind.MISSING_FIELDS, MISSING_FIELDS_MESSAGE)

    if not is_valid_email(trimmed["email"]):
        raise DraftValidationError(ErrorKind.INVALID_EMAIL, INVALID_EMAIL_MESSAGE)
