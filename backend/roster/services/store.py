"""
Record Store - the ordered, in-memory collection of student records.

Each operation opens its own ORM session and commits before returning.
Callers only ever see StudentRecord snapshots, never live ORM rows, so
nothing outside this module can change what is stored.
"""

import uuid
from datetime import datetime, timezone
from typing import List, Optional
from sqlalchemy import func
from sqlalchemy.orm import sessionmaker

from roster.errors import RecordNotFound
from roster.models.student import Student
from roster.schemas import StudentFields, StudentRecord
from roster.services.validation import validate_fields
from roster.logging_config import get_logger, log_with_context

logger = get_logger("db")


def new_student_id() -> str:
    """Random UUID4 identifier; unique without relying on clock resolution."""
    return str(uuid.uuid4())


class StudentStore:
    """
    Ordered student records backed by a SQLAlchemy session factory.

    Insertion order is preserved and edits never reorder records.
    """

    def __init__(self, session_factory: sessionmaker):
        self._session_factory = session_factory

    def add(self, record: StudentRecord) -> StudentRecord:
        """
        Append a record to the end of the sequence.

        The record is validated again here so the table can never hold
        an entry that breaks the field rules, whoever calls this.
        """
        validate_fields(record)

        with self._session_factory() as db:
            last_position = db.query(func.max(Student.position)).scalar() or 0
            row = Student(
                id=record.id,
                position=last_position + 1,
                name=record.name,
                email=record.email,
                id_number=record.id_number,
                created_at=datetime.now(timezone.utc)
            )
            db.add(row)
            db.commit()
            stored = StudentRecord.model_validate(row)

        log_with_context(logger, "INFO", "Added student: {}".format(stored.name),
                         context={"student_id": stored.id},
                         extra_data={"position": last_position + 1})
        return stored

    def update(self, student_id: str, fields: StudentFields) -> StudentRecord:
        """
        Replace the fields of the record with this id, keeping id and position.

        Raises:
            RecordNotFound: no record has this id
        """
        validate_fields(fields)

        with self._session_factory() as db:
            row = db.query(Student).filter(Student.id == student_id).first()
            if row is None:
                log_with_context(logger, "ERROR", "Update of unknown student {}".format(student_id),
                                 context={"student_id": student_id})
                raise RecordNotFound(student_id)

            row.name = fields.name
            row.email = fields.email
            row.id_number = fields.id_number
            row.updated_at = datetime.now(timezone.utc)
            db.commit()
            stored = StudentRecord.model_validate(row)

        log_with_context(logger, "INFO", "Updated student: {}".format(stored.name),
                         context={"student_id": student_id})
        return stored

    def remove(self, student_id: str) -> bool:
        """Delete the record with this id. Absent ids are a no-op; returns whether a row went away."""
        with self._session_factory() as db:
            deleted = db.query(Student).filter(Student.id == student_id).delete()
            db.commit()

        if deleted:
            log_with_context(logger, "INFO", "Removed student {}".format(student_id),
                             context={"student_id": student_id})
        else:
            log_with_context(logger, "DEBUG", "Remove ignored, no student {}".format(student_id),
                             context={"student_id": student_id})
        return bool(deleted)

    def get(self, student_id: str) -> Optional[StudentRecord]:
        with self._session_factory() as db:
            row = db.query(Student).filter(Student.id == student_id).first()
            return StudentRecord.model_validate(row) if row is not None else None

    def list(self) -> List[StudentRecord]:
        """Snapshot of all records in insertion order."""
        with self._session_factory() as db:
            rows = db.query(Student).order_by(Student.position).all()
            return [StudentRecord.model_validate(row) for row in rows]

    def count(self) -> int:
        with self._session_factory() as db:
            return db.query(func.count(Student.id)).scalar()
