"""Shared fixtures: every test gets its own empty in-memory database."""

import pytest
from fastapi.testclient import TestClient

from roster.database import build_session_factory
from roster.main import create_app
from roster.schemas import StudentRecord
from roster.services.drafts import DraftController
from roster.services.store import StudentStore, new_student_id
from roster.workspace import build_workspace

USERNAME = "admin"
PASSWORD = "admin123"


@pytest.fixture
def session_factory():
    return build_session_factory("sqlite://")


@pytest.fixture
def store(session_factory):
    return StudentStore(session_factory)


@pytest.fixture
def drafts(store):
    return DraftController(store)


@pytest.fixture
def make_record():
    def _make(name="Ann Lee", email="ann@example.com", id_number="123"):
        return StudentRecord(id=new_student_id(), name=name, email=email, id_number=id_number)
    return _make


@pytest.fixture
def workspace(session_factory):
    return build_workspace(USERNAME, PASSWORD, session_factory=session_factory)


@pytest.fixture
def client(workspace):
    with TestClient(create_app(workspace)) as c:
        yield c


@pytest.fixture
def authed_client(client):
    r = client.post("/api/auth/login", json={"username": USERNAME, "password": PASSWORD})
    assert r.status_code == 200
    return client
