"""
Student list API routes - read the store and delete records.

Every route requires an authenticated session.
"""

import time
from fastapi import APIRouter, Depends, Response

from roster.schemas import StudentRecord
from roster.workspace import Workspace, require_session
from roster.logging_config import get_logger, log_with_context

router = APIRouter()
logger = get_logger("http")


def serialize_student(record: StudentRecord) -> dict:
    """Serialize a StudentRecord for API response."""
    return {
        "id": record.id,
        "name": record.name,
        "email": record.email,
        "id_number": record.id_number,
        "display_line": record.display_line
    }


@router.get("/api/students")
def list_students(workspace: Workspace = Depends(require_session)):
    """List all students in insertion order."""
    start_time = time.time()

    students = workspace.store.list()

    duration_ms = (time.time() - start_time) * 1000
    log_with_context(logger, "DEBUG", "Listed {} students".format(len(students)),
                     extra_data={"duration_ms": round(duration_ms, 2)})

    return {
        "data": [serialize_student(s) for s in students],
        "total": len(students)
    }


@router.delete("/api/students/{student_id}", status_code=204)
def delete_student(student_id: str, workspace: Workspace = Depends(require_session)):
    """Delete a student. Deleting an unknown id succeeds and changes nothing."""
    workspace.drafts.delete(student_id)
    return Response(status_code=204)
