"""
Authentication API routes - the login gate in front of the record screen.

Provides endpoints for:
- Logging in with the fixed credential pair
- Logging out (also discards any open draft)
- Reading the current session flag
"""

from fastapi import APIRouter, Depends, HTTPException
from pydantic import BaseModel

from roster.workspace import Workspace, get_workspace
from roster.logging_config import get_logger, log_with_context

router = APIRouter()
logger = get_logger("http")


class LoginRequest(BaseModel):
    """Schema for a login attempt. Values are compared verbatim."""
    username: str
    password: str


class SessionResponse(BaseModel):
    authenticated: bool


@router.post("/api/auth/login", response_model=SessionResponse)
def login(request: LoginRequest, workspace: Workspace = Depends(get_workspace)):
    """Attempt a login; 401 with the failure message on mismatch."""
    outcome = workspace.session.login(request.username, request.password)
    if not outcome.success:
        raise HTTPException(status_code=401, detail=outcome.message)
    return SessionResponse(authenticated=True)


@router.post("/api/auth/logout", response_model=SessionResponse)
def logout(workspace: Workspace = Depends(get_workspace)):
    workspace.drafts.cancel()
    workspace.session.logout()
    log_with_context(logger, "INFO", "Session closed")
    return SessionResponse(authenticated=False)


@router.get("/api/auth/session", response_model=SessionResponse)
def get_session(workspace: Workspace = Depends(get_workspace)):
    return SessionResponse(authenticated=workspace.session.authenticated)
