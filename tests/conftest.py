"""
Pytest configuration and fixtures
"""
import os
from uuid import uuid4

import pytest

# The app bootstraps its own engine at import time; keep it off the disk.
os.environ.setdefault("DATABASE_URL", "sqlite://")

from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from auditx.database import Base, get_db
from auditx.main import app
from auditx.models import Course, Project, User

# bcrypt-shaped placeholder; fixture users authenticate by token only
SECRET_HASH = "$2b$12$KIXQJQ8n7n1w1vC2R3zVn.0pJcI7m5bZ7m8T2YgBq3c7k2m0y1u3K"


@pytest.fixture
def engine():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    yield engine
    Base.metadata.drop_all(bind=engine)
    engine.dispose()


@pytest.fixture
def db(engine):
    TestingSession = sessionmaker(autocommit=False, autoflush=False, bind=engine)
    session = TestingSession()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def client(engine):
    TestingSession = sessionmaker(autocommit=False, autoflush=False, bind=engine)

    def override_get_db():
        session = TestingSession()
        try:
            yield session
        finally:
            session.close()

    app.dependency_overrides[get_db] = override_get_db
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.pop(get_db, None)


@pytest.fixture
def make_user(db):
    """Insert a user and return it; the bearer token is the user id."""
    def _make(name, role="student", course_code=None, email=None):
        user = User(
            id=str(uuid4()),
            name=name,
            email=email or f"{name.lower().replace(' ', '.')}.{uuid4().hex[:6]}@college.edu",
            password_hash=SECRET_HASH,
            role=role,
            course_code=course_code,
        )
        db.add(user)
        db.commit()
        db.refresh(user)
        return user
    return _make


@pytest.fixture
def make_course(db):
    def _make(name, title="Course"):
        course = Course(id=str(uuid4()), name=name, title=title, semester="5", batch="2026")
        db.add(course)
        db.commit()
        return course
    return _make


@pytest.fixture
def make_project(db):
    """Insert a project directly, bypassing the assignment engine."""
    def _make(student, course_code, mentor=None, title="Project", team_name="Team", leader_name="Leader"):
        project = Project(
            id=str(uuid4()),
            student_id=student.id,
            team_name=team_name,
            leader_name=leader_name,
            members=[],
            repo_link="https://github.com/example/repo",
            title=title,
            description="desc",
            domain="web",
            tech_stack="python",
            course_code=course_code,
            semester="5",
            academic_year="2026-27",
            mentor_id=mentor.id if mentor else None,
        )
        db.add(project)
        db.commit()
        db.refresh(project)
        return project
    return _make


def auth(user):
    return {"Authorization": f"Bearer {user.id}"}


def submission(course_code, title="Smart Attendance", team_name="Alpha", leader_name="Ravi"):
    return {
        "team_name": team_name,
        "leader_name": leader_name,
        "members": ["Ravi", "Meera"],
        "repo_link": "https://github.com/example/attendance",
        "title": title,
        "description": "Face-recognition attendance",
        "domain": "AI",
        "tech_stack": "Python, FastAPI",
        "course_code": course_code,
        "subject_name": "Project Based Learning",
        "semester": "5",
        "academic_year": "2026-27",
    }
