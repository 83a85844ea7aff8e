"""
Student model - one committed student record.

Rows are only ever written through StudentStore. The position column
fixes insertion order: it is assigned on insert and never changes, so
editing a record keeps its place in the list.
"""

import uuid
from datetime import datetime, timezone
from sqlalchemy import Column, Text, DateTime, Integer, String
from roster.database import Base


class Student(Base):
    """SQLAlchemy model for the students table."""
    __tablename__ = "students"

    id = Column(String(36), primary_key=True, default=lambda: str(uuid.uuid4()),
                doc="Unique student identifier, immutable once assigned")
    position = Column(Integer, nullable=False, unique=True,
                      doc="Insertion sequence number used for ordering")
    name = Column(Text, nullable=False,
                  doc="Student's name, trimmed")
    email = Column(Text, nullable=False,
                   doc="Student email, trimmed")
    id_number = Column(Text, nullable=False,
                       doc="Student ID number as entered (not checksum validated)")
    created_at = Column(DateTime, default=lambda: datetime.now(timezone.utc),
                        doc="Timestamp when the record was created")
    updated_at = Column(DateTime, nullable=True,
                        doc="Timestamp of the last committed edit")

    def __repr__(self):
        return f"<Student(id={self.id}, name='{self.name}', email='{self.email}')>"
