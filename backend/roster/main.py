"""
Student Roster - FastAPI Application Entry Point.

This module:
1. Sets up structured JSON logging
2. Builds the record core (workspace) for the app
3. Implements request ID middleware (X-Request-ID header)
4. Registers the API route handlers
5. Provides health check endpoint

Layout:
- routes/: API endpoint handlers (no decision logic)
- services/: authentication, validation, record store, draft controller
- models/: SQLAlchemy ORM models
- logging_config.py: Structured logging configuration
- database.py: Engine and session factory
"""

import time
from typing import Optional
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware

from roster import __version__
from roster.config import CORS_ORIGINS
from roster.logging_config import (
    setup_logging, get_logger, log_with_context,
    request_id_var, generate_request_id
)
from roster.routes import auth, students, draft
from roster.workspace import Workspace, build_workspace

setup_logging()
logger = get_logger("http")


def create_app(workspace: Optional[Workspace] = None) -> FastAPI:
    """Create the FastAPI application around a workspace (a fresh one by default)."""
    app = FastAPI(
        title="Student Roster",
        description=(
            "Single-operator student record management: log in, then create, "
            "edit and delete student records held in memory."
        ),
        version=__version__,
        docs_url="/docs",
        redoc_url="/redoc"
    )
    app.state.workspace = workspace if workspace is not None else build_workspace()

    app.add_middleware(
        CORSMiddleware,
        allow_origins=CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
        expose_headers=["X-Request-ID"]
    )

    @app.middleware("http")
    async def request_id_middleware(request: Request, call_next):
        """Tag the request with a UUID, log start and completion with latency."""
        req_id = generate_request_id()
        request_id_var.set(req_id)
        start_time = time.time()

        log_with_context(logger, "INFO",
            f"Request started: {request.method} {request.url.path}",
            context={"request_id": req_id},
            extra_data={
                "ip": request.client.host if request.client else "unknown",
                "user_agent": request.headers.get("user-agent", "")
            })

        response = await call_next(request)

        duration_ms = (time.time() - start_time) * 1000
        response.headers["X-Request-ID"] = req_id

        log_with_context(logger, "INFO",
            f"Request completed: {request.method} {request.url.path} → {response.status_code}",
            context={"request_id": req_id},
            extra_data={
                "duration_ms": round(duration_ms, 2),
                "status_code": response.status_code
            })

        return response

    app.include_router(auth.router, tags=["Auth"])
    app.include_router(students.router, tags=["Students"])
    app.include_router(draft.router, tags=["Draft"])

    @app.get("/health", tags=["Health"])
    def health_check():
        return {"status": "healthy", "service": "student-roster", "version": __version__}

    @app.get("/", tags=["Root"])
    def root():
        """Root endpoint with API information."""
        return {
            "service": "Student Roster",
            "version": __version__,
            "docs": "/docs",
            "health": "/health",
            "endpoints": {
                "login": "POST /api/auth/login",
                "logout": "POST /api/auth/logout",
                "students_list": "GET /api/students",
                "student_delete": "DELETE /api/students/{id}",
                "draft_state": "GET /api/draft",
                "draft_create": "POST /api/draft",
                "draft_edit": "POST /api/draft/edit/{id}",
                "draft_set_field": "PATCH /api/draft",
                "draft_submit": "POST /api/draft/submit",
                "draft_cancel": "POST /api/draft/cancel"
            }
        }

    return app


app = create_app()
