# auditx/routers/admin.py
from __future__ import annotations

import logging
from datetime import datetime
from typing import List, Optional
from uuid import uuid4

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from auditx.database import get_db
from auditx.models import Course, Evaluation, EvaluationPeriod, Notification, Project, User, VivaSession
from auditx.schemas.admin import (
    AdminStats,
    CourseCreate,
    CourseOut,
    CourseWithCount,
    EvaluationPeriodIn,
    EvaluationPeriodOut,
    ExtendDeadlineRequest,
    MentorLoad,
    MessageResponse,
)
from auditx.schemas.evaluation import VivaSessionCreate, VivaSessionOut
from auditx.schemas.project import AssignMentorRequest, ProjectOut
from auditx.schemas.user import UserCreate, UserResponse
from auditx.routers.evaluations import schedule_viva
from auditx.utils.assignment import load_table
from auditx.utils.auth import get_password_hash, require_roles
from auditx.utils.errors import MentorNotFound, ProjectNotFound
from auditx.utils.notifications import broadcast, format_date
from auditx.utils.submission import override_mentor

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/admin", tags=["Admin"])

admin_only = require_roles("admin")


def _current_period(db: Session) -> Optional[EvaluationPeriod]:
    return db.query(EvaluationPeriod).first()


def _mentors(db: Session) -> List[User]:
    return db.query(User).filter(User.role == "mentor").all()


# ------------------------------------------------------------
# Overview
# ------------------------------------------------------------
@router.get("/stats", response_model=AdminStats)
def get_admin_stats(db: Session = Depends(get_db), _: User = Depends(admin_only)):
    """
    Portal-wide counters plus the current load of every mentor.
    Pending = projects without an evaluation.
    """
    users = db.query(User).all()
    projects = db.query(Project).all()
    evaluated = db.query(Evaluation).count()

    loads = load_table(projects)
    mentors = sorted((u for u in users if u.role == "mentor"), key=lambda u: (loads.get(u.id, 0), u.name))

    return AdminStats(
        total_students=sum(1 for u in users if u.role == "student"),
        total_mentors=len(mentors),
        total_projects=len(projects),
        evaluated_projects=evaluated,
        pending_projects=len(projects) - evaluated,
        unassigned_projects=sum(1 for p in projects if not p.mentor_id),
        courses=db.query(Course).count(),
        mentor_load=[
            MentorLoad(mentor_id=m.id, name=m.name, course_code=m.course_code, load=loads.get(m.id, 0))
            for m in mentors
        ],
    )


@router.get("/projects", response_model=List[ProjectOut])
def get_all_projects(db: Session = Depends(get_db), _: User = Depends(admin_only)):
    return db.query(Project).order_by(Project.created_at).all()


@router.post("/assign", response_model=ProjectOut)
def assign_mentor(
    payload: AssignMentorRequest,
    db: Session = Depends(get_db),
    admin: User = Depends(admin_only),
):
    """
    Manual override of the auto-assignment.
    """
    try:
        return override_mentor(db, payload.project_id, payload.mentor_id, admin=admin)
    except (ProjectNotFound, MentorNotFound) as e:
        raise HTTPException(status_code=404, detail=str(e))


@router.post("/users", response_model=UserResponse, status_code=status.HTTP_201_CREATED)
def create_user(payload: UserCreate, db: Session = Depends(get_db), admin: User = Depends(admin_only)):
    if db.query(User).filter(User.email == payload.email).first():
        raise HTTPException(status_code=400, detail="User already exists")

    user = User(
        id=str(uuid4()),
        name=payload.name,
        email=payload.email,
        password_hash=get_password_hash(payload.password),
        role=payload.role,
        course_code=payload.course_code,
    )
    db.add(user)
    db.commit()
    db.refresh(user)
    logger.info("Admin %s created %s user %s", admin.id, user.role, user.email)
    return user


# ------------------------------------------------------------
# Courses
# ------------------------------------------------------------
@router.get("/courses", response_model=List[CourseWithCount])
def get_courses(db: Session = Depends(get_db), _: User = Depends(admin_only)):
    # students are counted per course through their submissions
    courses = db.query(Course).order_by(Course.name).all()
    projects = db.query(Project.course_code, Project.student_id).all()

    result = []
    for c in courses:
        students = {sid for code, sid in projects if code == c.name}
        result.append(CourseWithCount(
            id=c.id, name=c.name, title=c.title, semester=c.semester, batch=c.batch,
            student_count=len(students),
        ))
    return result


@router.post("/courses", response_model=CourseOut, status_code=status.HTTP_201_CREATED)
def create_course(payload: CourseCreate, db: Session = Depends(get_db), _: User = Depends(admin_only)):
    if db.query(Course).filter(Course.name == payload.name).first():
        raise HTTPException(status_code=400, detail="Course already exists")

    course = Course(
        id=str(uuid4()),
        name=payload.name,
        title=payload.title,
        semester=payload.semester,
        batch=str(datetime.utcnow().year),
    )
    db.add(course)
    db.commit()
    db.refresh(course)
    return course


# ------------------------------------------------------------
# Viva sessions
# ------------------------------------------------------------
@router.get("/viva-sessions", response_model=List[VivaSessionOut])
def get_viva_sessions(db: Session = Depends(get_db), _: User = Depends(admin_only)):
    return db.query(VivaSession).order_by(VivaSession.created_at).all()


@router.post("/viva-sessions", response_model=VivaSessionOut, status_code=status.HTTP_201_CREATED)
def create_viva_session(
    payload: VivaSessionCreate,
    db: Session = Depends(get_db),
    admin: User = Depends(admin_only),
):
    return schedule_viva(db, payload, admin)


# ------------------------------------------------------------
# Evaluation period and broadcasts
# ------------------------------------------------------------
@router.post("/evaluation-period", response_model=MessageResponse)
def create_evaluation_period(
    payload: EvaluationPeriodIn,
    db: Session = Depends(get_db),
    admin: User = Depends(admin_only),
):
    period = _current_period(db)
    if period is None:
        period = EvaluationPeriod(id=str(uuid4()))
        db.add(period)
    period.title = payload.title
    period.start_date = payload.start_date
    period.end_date = payload.end_date

    broadcast(
        db,
        _mentors(db),
        title=f"Evaluation Period Started: {payload.title}",
        message=(
            f"Please conduct PBL evaluations from {format_date(payload.start_date)} "
            f"to {format_date(payload.end_date)}."
        ),
        kind="info",
        sender_id=admin.id,
    )
    db.commit()
    return MessageResponse(message="Evaluation period created and mentors notified")


@router.get("/evaluation-period", response_model=Optional[EvaluationPeriodOut])
def get_evaluation_period(db: Session = Depends(get_db), _: User = Depends(admin_only)):
    return _current_period(db)


@router.post("/send-reminder", response_model=MessageResponse)
def send_reminder(db: Session = Depends(get_db), admin: User = Depends(admin_only)):
    period = _current_period(db)
    if period is None:
        raise HTTPException(status_code=400, detail="No active evaluation period found")

    broadcast(
        db,
        _mentors(db),
        title="Reminder: Evaluation Deadline",
        message=f"Reminder to complete all evaluations by {format_date(period.end_date)}.",
        kind="warning",
        sender_id=admin.id,
    )
    db.commit()
    return MessageResponse(message="Reminders sent to mentors")


@router.post("/extend-deadline", response_model=MessageResponse)
def extend_deadline(
    payload: ExtendDeadlineRequest,
    db: Session = Depends(get_db),
    admin: User = Depends(admin_only),
):
    period = _current_period(db)
    if period is None:
        raise HTTPException(status_code=400, detail="No active evaluation period found")

    period.end_date = payload.new_date
    recipients = db.query(User).filter(User.role.in_(("mentor", "student"))).all()
    broadcast(
        db,
        recipients,
        title="Deadline Extended",
        message=f"The date of PBL submission (evaluation) is extended to {format_date(payload.new_date)}.",
        kind="success",
        sender_id=admin.id,
    )
    db.commit()
    return MessageResponse(message="Deadline extended and notifications sent")


@router.post("/reset", response_model=MessageResponse)
def reset_system(db: Session = Depends(get_db), admin: User = Depends(admin_only)):
    """
    Wipes everything except admin accounts and courses.
    """
    db.query(Notification).delete(synchronize_session=False)
    db.query(Evaluation).delete(synchronize_session=False)
    db.query(VivaSession).delete(synchronize_session=False)
    db.query(Project).delete(synchronize_session=False)
    db.query(EvaluationPeriod).delete(synchronize_session=False)
    removed = db.query(User).filter(User.role != "admin").delete(synchronize_session=False)
    db.commit()

    logger.warning("System reset by %s: %d non-admin users removed", admin.id, removed)
    return MessageResponse(message="System reset successfully. All data cleared except admin accounts and courses.")
