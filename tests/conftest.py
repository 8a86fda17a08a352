"""Shared fixtures for the course portal API tests."""

import os

# Settings are read at import time, so the environment is prepared first
os.environ["DATABASE_URL"] = "sqlite://"
os.environ["BCRYPT_SALT_ROUNDS"] = "4"
os.environ["ADMIN_USERNAME"] = "admin"
os.environ["ADMIN_PASSWORD"] = "test-admin-password"
os.environ["SECRET_KEY"] = "test-secret-key"

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

import models.course  # noqa: F401
import models.order  # noqa: F401
import models.users  # noqa: F401
from database import Base, get_db
from main import app


@pytest.fixture
def engine():
    """Fresh in-memory database per test."""
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    yield engine
    engine.dispose()


@pytest.fixture
def session_factory(engine):
    return sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture
def db_session(session_factory):
    session = session_factory()
    yield session
    session.close()


@pytest.fixture
def client(session_factory):
    def override_get_db():
        db = session_factory()
        try:
            yield db
        finally:
            db.close()

    app.dependency_overrides[get_db] = override_get_db
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def signup(client):
    """Register an account through the API and return the response."""

    def _signup(username, role="student", password="secret123", confirmation=None, fullname=None):
        return client.post(
            "/signup",
            json={
                "fullname": fullname or f"{username.title()} Tester",
                "username": username,
                "password": password,
                "passwordConfirmation": password if confirmation is None else confirmation,
                "role": role,
            },
        )

    return _signup


@pytest.fixture
def approved_student(client, signup):
    """A student that went through signup and admin approval."""

    def _approved_student(username, password="secret123", fullname=None):
        signup(username, password=password, fullname=fullname)
        client.post(f"/admin/approve-student/{username}")
        return username

    return _approved_student


@pytest.fixture
def save_order(client):
    def _save_order(username, course_name="Python Basics", course_fee=150, **extra):
        body = {
            "username": username,
            "courseName": course_name,
            "courseFee": course_fee,
            "paymentMethod": "card",
            "country": "Poland",
        }
        body.update(extra)
        return client.post("/saveOrder", json=body)

    return _save_order


@pytest.fixture
def course_payload():
    return {
        "courseName": "Python Basics",
        "description": "Introduction to Python",
        "duration": "6 weeks",
        "startDate": "2026-11-01",
        "objectives": "Write small programs",
        "courseContent": "Syntax, functions, modules",
        "requirements": "None",
        "courseFee": "150",
    }
