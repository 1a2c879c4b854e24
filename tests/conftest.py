"""Pytest fixtures: an in-memory database per test and an API client bound to it."""
import os

# Set test environment before importing the app
os.environ["DATABASE_URL"] = "sqlite://"
os.environ.setdefault("SECRET_KEY", "test-secret")

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.pool import StaticPool
from sqlmodel import Session

from taskboard.database import create_tables, get_db, make_engine
from taskboard.main import app
from taskboard.models import Task, TaskPriority

from .helpers import ALICE


@pytest.fixture()
def engine():
    engine = make_engine("sqlite://", poolclass=StaticPool)
    create_tables(bind=engine)
    yield engine
    engine.dispose()


@pytest.fixture()
def db(engine):
    with Session(engine) as session:
        yield session


@pytest.fixture()
def make_task(db):
    """Insert a task row directly, with explicit timestamps when needed."""

    def _make(user_id: str = ALICE, title: str = "Task", **fields) -> Task:
        fields.setdefault("priority", TaskPriority.MEDIUM)
        if "created_at" in fields:
            fields.setdefault("updated_at", fields["created_at"])
        task = Task(user_id=user_id, title=title, **fields)
        db.add(task)
        db.commit()
        db.refresh(task)
        return task

    return _make


@pytest.fixture()
def client(engine):
    def override_get_db():
        with Session(engine) as session:
            yield session

    app.dependency_overrides[get_db] = override_get_db
    yield TestClient(app)
    app.dependency_overrides.clear()

