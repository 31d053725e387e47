# auditx/utils/submission.py
from __future__ import annotations

import logging
from datetime import datetime
from typing import Iterable
from uuid import uuid4

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from auditx.models.course import Course
from auditx.models.project import Project
from auditx.models.user import User
from auditx.schemas.project import ProjectCreate
from auditx.utils.assignment import assign_mentor
from auditx.utils.errors import ConflictError, DuplicateSubmission, MentorNotFound, ProjectNotFound
from auditx.utils.notifications import notify

logger = logging.getLogger(__name__)


def ensure_not_duplicate(student_id: str, course_code: str, projects: Iterable[Project]) -> None:
    """One project per student per course; course codes compared exactly."""
    for p in projects:
        if p.student_id == student_id and p.course_code == course_code:
            raise DuplicateSubmission(course_code)


def _resolve_subject(db: Session, course_code: str, fallback: str | None) -> str | None:
    # the course table is the source of truth for the subject title
    course = db.query(Course).filter(Course.name == course_code).first()
    return course.title if course else fallback


def submit_project(db: Session, student: User, payload: ProjectCreate) -> Project:
    """
    Duplicate check -> mentor assignment -> insert, inside one transaction.

    Mentor rows are locked (FOR UPDATE) before load is counted, so
    on PostgreSQL two submissions to the same course cannot both see the same
    "least loaded" mentor. SQLite ignores the lock; there the unique
    (student_id, course_code) constraint still stops racing duplicates.
    """
    course_code = payload.course_code

    ensure_not_duplicate(
        student.id,
        course_code,
        db.query(Project).filter(Project.student_id == student.id).all(),
    )

    # eligibility is decided by the engine alone; the lock just covers every mentor row
    mentors = db.query(User).filter(User.role == "mentor").with_for_update().all()
    mentor_id = assign_mentor(course_code, mentors, db.query(Project).all())

    project = Project(
        id=str(uuid4()),
        student_id=student.id,
        team_name=payload.team_name,
        leader_name=payload.leader_name,
        members=list(payload.members),
        repo_link=payload.repo_link,
        title=payload.title,
        description=payload.description,
        domain=payload.domain,
        tech_stack=payload.tech_stack,
        course_code=course_code,
        subject_name=_resolve_subject(db, course_code, payload.subject_name),
        semester=payload.semester,
        academic_year=payload.academic_year,
        mentor_id=mentor_id,
        analyzed=False,
        created_at=datetime.utcnow(),
    )
    db.add(project)

    if mentor_id:
        notify(
            db,
            mentor_id,
            title=f"New project assigned: {project.title}",
            message=f"Team {project.team_name} ({course_code}) has been assigned to you for evaluation.",
            kind="info",
            sender_id=student.id,
        )

    try:
        db.commit()
    except IntegrityError as e:
        db.rollback()
        logger.warning("Concurrent submission rejected for student %s, course %s", student.id, course_code)
        raise ConflictError(f"A project for {course_code} was submitted concurrently") from e

    db.refresh(project)
    logger.info("Project %s submitted by %s for %s (mentor=%s)", project.id, student.id, course_code, mentor_id)
    return project


def override_mentor(db: Session, project_id: str, mentor_id: str, admin: User | None = None) -> Project:
    """
    Manual admin assignment. Bypasses the engine and overwrites mentor_id
    unconditionally; nothing is written if either record is missing.
    """
    project = db.get(Project, project_id)
    if not project:
        raise ProjectNotFound(project_id)

    mentor = db.get(User, mentor_id)
    if not mentor or mentor.role != "mentor":
        raise MentorNotFound(mentor_id)

    previous = project.mentor_id
    project.mentor_id = mentor.id
    notify(
        db,
        mentor.id,
        title=f"Project assigned: {project.title}",
        message=f"An administrator assigned team {project.team_name} ({project.course_code}) to you.",
        kind="info",
        sender_id=admin.id if admin else None,
    )
    db.commit()
    db.refresh(project)

    logger.info("Project %s reassigned %s -> %s", project.id, previous, mentor.id)
    return project
