from __future__ import annotations

import logging
import math
from datetime import datetime
from uuid import uuid4

from fastapi import APIRouter, Depends, HTTPException, Response, status
from sqlalchemy.orm import Session

from auditx.database import get_db
from auditx.models.evaluation import Evaluation
from auditx.models.project import Project
from auditx.models.schedule import VivaSession
from auditx.models.user import User
from auditx.schemas.evaluation import (
    BenchmarkOut,
    EvaluationCreate,
    EvaluationOut,
    VivaSessionCreate,
    VivaSessionOut,
)
from auditx.utils.auth import get_current_user, require_roles
from auditx.utils.notifications import notify

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/evaluations", tags=["Evaluations"])


@router.post("/", response_model=EvaluationOut, status_code=status.HTTP_201_CREATED)
def submit_evaluation(
    payload: EvaluationCreate,
    response: Response,
    db: Session = Depends(get_db),
    user: User = Depends(require_roles("mentor", "admin")),
):
    """
    Creates the project's evaluation, or overwrites it if one exists.
    201 on first grading, 200 on re-grading.
    """
    project = db.get(Project, payload.project_id)
    if not project:
        raise HTTPException(status_code=404, detail="Project not found")

    marks = payload.marks.model_dump()
    total = payload.marks.total()

    evaluation = project.evaluation
    if evaluation is not None:
        evaluation.marks = marks
        evaluation.total = total
        evaluation.feedback = payload.feedback
        evaluation.evaluator_id = user.id
        evaluation.updated_at = datetime.utcnow()
        response.status_code = status.HTTP_200_OK
        title = f"Evaluation updated: {project.title}"
    else:
        evaluation = Evaluation(
            id=str(uuid4()),
            project_id=project.id,
            student_id=project.student_id,
            evaluator_id=user.id,
            marks=marks,
            total=total,
            feedback=payload.feedback,
        )
        db.add(evaluation)
        title = f"Project evaluated: {project.title}"

    notify(
        db,
        project.student_id,
        title=title,
        message=f"Your project scored {total}/100.",
        kind="success",
        sender_id=user.id,
    )
    db.commit()
    db.refresh(evaluation)

    logger.info("Project %s graded %d by %s", project.id, total, user.id)
    return evaluation


@router.get("/benchmarks", response_model=BenchmarkOut)
def get_benchmarks(db: Session = Depends(get_db), _: User = Depends(get_current_user)):
    totals = [t for (t,) in db.query(Evaluation.total).all()]
    if not totals:
        return BenchmarkOut(average=0, total_projects=0)
    # halves round up; totals are never negative
    average = math.floor(sum(totals) / len(totals) + 0.5)
    return BenchmarkOut(average=average, total_projects=len(totals))


def schedule_viva(db: Session, payload: VivaSessionCreate, organizer: User) -> VivaSessionOut:
    """
    Creates a viva session. With student_count > 0 the first N pending
    (not yet evaluated) projects get the slot stamped on them and their
    students are notified.
    """
    session = VivaSession(
        id=str(uuid4()),
        title=payload.title,
        date=payload.date,
        time=payload.time,
        place=payload.place,
        kind=payload.kind or "Viva",
        status="Scheduled",
        mentor_id=organizer.id,
        created_at=datetime.utcnow(),
    )
    db.add(session)

    invited = 0
    if payload.student_count > 0:
        pending = (
            db.query(Project)
            .outerjoin(Evaluation, Evaluation.project_id == Project.id)
            .filter(Evaluation.id.is_(None))
            .order_by(Project.created_at)
            .limit(payload.student_count)
            .all()
        )
        for project in pending:
            notify(
                db,
                project.student_id,
                title=f"Viva Session Scheduled: {payload.title}",
                message=(
                    "A new viva session has been scheduled. Status: Pending. "
                    f"Please attend on {payload.date} at {payload.time} in {payload.place}."
                ),
                kind="warning",
                sender_id=organizer.id,
            )
            project.viva_date = payload.date
            project.viva_time = payload.time
            project.viva_place = payload.place
            invited += 1

    db.commit()
    db.refresh(session)
    logger.info("Viva session %s scheduled by %s, %d students invited", session.id, organizer.id, invited)

    return VivaSessionOut.model_validate(session).model_copy(update={"invited_count": invited})


@router.post("/sessions", response_model=VivaSessionOut, status_code=status.HTTP_201_CREATED)
def create_session(
    payload: VivaSessionCreate,
    db: Session = Depends(get_db),
    user: User = Depends(require_roles("mentor", "admin")),
):
    return schedule_viva(db, payload, user)
