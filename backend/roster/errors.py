"""
Error kinds raised by the record core.

Validation failures are recoverable and end up as a message on the open
Draft. RecordNotFound is a logic fault: the Draft Controller only ever
edits records it loaded from the store.
"""

from enum import Enum

MISSING_FIELDS_MESSAGE = "All fields are required."
INVALID_EMAIL_MESSAGE = "Invalid email format."


class ErrorKind(str, Enum):
    MISSING_FIELDS = "MissingFields"
    INVALID_EMAIL = "InvalidEmail"


class RosterError(Exception):
    """Base class for all roster errors."""


class DraftValidationError(RosterError):
    """A candidate draft broke one of the field rules."""

    def __init__(self, kind: ErrorKind, message: str):
        super().__init__(message)
        self.kind = kind
        self.message = message


class RecordNotFound(RosterError):
    def __init__(self, student_id: str):
        super().__init__("Student not found: {}".format(student_id))
        self.student_id = student_id


class DraftStateError(RosterError):
    """Operation not allowed in the current draft state."""


class UnknownFieldError(RosterError):
    def __init__(self, field: str):
        super().__init__("Unknown draft field: {}".format(field))
        self.field = field
