"""
Immutable value types shared by the store, the draft controller and the
HTTP layer.
"""

from typing import Optional
from pydantic import BaseModel, ConfigDict

from roster.errors import ErrorKind


class StudentFields(BaseModel):
    """The three operator-editable fields of a student."""
    model_config = ConfigDict(frozen=True)

    name: str = ""
    email: str = ""
    id_number: str = ""


class StudentRecord(StudentFields):
    """A committed student entry, detached from the database session."""
    model_config = ConfigDict(frozen=True, from_attributes=True)

    id: str

    @property
    def display_line(self) -> str:
        return "{} - {} - {}".format(self.name, self.email, self.id_number)


class Draft(StudentFields):
    """
    Working copy of the add/edit form.

    A Draft is never mutated: every field edit replaces it with a copy.
    `error` holds the message of the last rejected submit, if any.
    """
    error: Optional[str] = None
    error_kind: Optional[ErrorKind] = None

    @classmethod
    def from_record(cls, record: StudentRecord) -> "Draft":
        return cls(name=record.name, email=record.email, id_number=record.id_number)
