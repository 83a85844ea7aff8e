"""
Draft API routes - drive the add/edit form state machine.

Provides endpoints for:
- Reading the current form state (mode, title, draft, error)
- Opening the form for a new or an existing student
- Setting one field at a time
- Submitting (validate and commit) and cancelling

Validation failures are not HTTP errors of the form itself: submit
answers 422 with the still-open draft carrying the message to show.
"""

from typing import Optional
from fastapi import APIRouter, Depends, HTTPException
from fastapi.responses import JSONResponse
from pydantic import BaseModel, Field

from roster.errors import DraftStateError, RecordNotFound, UnknownFieldError
from roster.routes.students import serialize_student
from roster.services.drafts import DraftController
from roster.workspace import Workspace, require_session
from roster.logging_config import get_logger, log_with_context

router = APIRouter()
logger = get_logger("http")


class SetFieldRequest(BaseModel):
    """Schema for a single field edit."""
    field: str = Field(..., description="One of name, email, id_number")
    value: str = Field("", description="New raw value, not trimmed")


def serialize_draft_state(drafts: DraftController, opened: Optional[bool] = None) -> dict:
    """Serialize the form state for rendering."""
    draft = drafts.draft
    result = {
        "state": drafts.mode.value,
        "editing_id": drafts.editing_id,
        "title": drafts.title,
        "action_label": drafts.action_label,
        "draft": draft.model_dump(mode="json") if draft is not None else None
    }
    if opened is not None:
        result["opened"] = opened
    return result


@router.get("/api/draft")
def get_draft(workspace: Workspace = Depends(require_session)):
    return serialize_draft_state(workspace.drafts)


@router.post("/api/draft")
def open_for_create(workspace: Workspace = Depends(require_session)):
    """Open an empty form for a new student."""
    try:
        workspace.drafts.open_for_create()
    except DraftStateError as e:
        raise HTTPException(status_code=409, detail=str(e))
    return serialize_draft_state(workspace.drafts, opened=True)


@router.post("/api/draft/edit/{student_id}")
def open_for_edit(student_id: str, workspace: Workspace = Depends(require_session)):
    """Open the form on an existing student. Unknown ids leave the form closed."""
    try:
        draft = workspace.drafts.open_for_edit(student_id)
    except DraftStateError as e:
        raise HTTPException(status_code=409, detail=str(e))
    return serialize_draft_state(workspace.drafts, opened=draft is not None)


@router.patch("/api/draft")
def set_field(request: SetFieldRequest, workspace: Workspace = Depends(require_session)):
    try:
        workspace.drafts.set_field(request.field, request.value)
    except DraftStateError as e:
        raise HTTPException(status_code=409, detail=str(e))
    except UnknownFieldError as e:
        raise HTTPException(status_code=422, detail=str(e))
    return serialize_draft_state(workspace.drafts)


@router.post("/api/draft/submit")
def submit(workspace: Workspace = Depends(require_session)):
    """Validate and commit the open draft."""
    drafts = workspace.drafts
    editing_id = drafts.editing_id
    try:
        record = drafts.submit()
    except DraftStateError as e:
        raise HTTPException(status_code=409, detail=str(e))
    except RecordNotFound as e:
        log_with_context(logger, "ERROR", "Submit targeted a missing student",
                         context={"student_id": editing_id})
        raise HTTPException(status_code=404, detail=str(e))

    if record is None:
        return JSONResponse(status_code=422, content=serialize_draft_state(drafts))

    return {
        "student": serialize_student(record),
        **serialize_draft_state(drafts)
    }


@router.post("/api/draft/cancel")
def cancel(workspace: Workspace = Depends(require_session)):
    workspace.drafts.cancel()
    return serialize_draft_state(workspace.drafts)
