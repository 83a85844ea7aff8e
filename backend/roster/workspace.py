"""
Composition of the record core for one running application.

A Workspace bundles the authenticator, the operator session, the store
and the draft controller. There is exactly one per app, held on
`app.state.workspace`.
"""

from dataclasses import dataclass
from typing import Optional
from fastapi import Depends, HTTPException, Request
from sqlalchemy.orm import sessionmaker

from roster.config import ROSTER_USERNAME, ROSTER_PASSWORD, DATABASE_URL
from roster.database import build_session_factory
from roster.services.auth import Authenticator, OperatorSession
from roster.services.drafts import DraftController
from roster.services.store import StudentStore


@dataclass
class Workspace:
    authenticator: Authenticator
    session: OperatorSession
    store: StudentStore
    drafts: DraftController


def build_workspace(username: str = ROSTER_USERNAME, password: str = ROSTER_PASSWORD,
                    session_factory: Optional[sessionmaker] = None) -> Workspace:
    """Build the core objects, creating a fresh database when no session factory is given."""
    if session_factory is None:
        session_factory = build_session_factory(DATABASE_URL)

    authenticator = Authenticator(username, password)
    store = StudentStore(session_factory)
    return Workspace(
        authenticator=authenticator,
        session=OperatorSession(authenticator),
        store=store,
        drafts=DraftController(store),
    )


def get_workspace(request: Request) -> Workspace:
    """FastAPI dependency returning the app's workspace."""
    return request.app.state.workspace


def require_session(workspace: Workspace = Depends(get_workspace)) -> Workspace:
    """FastAPI dependency that rejects calls made before a successful login."""
    if not workspace.session.authenticated:
        raise HTTPException(status_code=401, detail="Not authenticated")
    return workspace
