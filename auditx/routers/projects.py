from __future__ import annotations

from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query, status
from sqlalchemy.orm import Session

from auditx.database import get_db
from auditx.models.project import Project
from auditx.models.user import User
from auditx.schemas.project import ProjectCreate, ProjectOut, ProjectWithEvaluation
from auditx.utils.auth import get_current_user, require_roles
from auditx.utils.errors import ConflictError, DuplicateSubmission
from auditx.utils.submission import submit_project
from auditx.utils.visibility import filter_visible

router = APIRouter(prefix="/api/projects", tags=["Projects"])


@router.post("/", response_model=ProjectOut, status_code=status.HTTP_201_CREATED)
def create_project(
    payload: ProjectCreate,
    db: Session = Depends(get_db),
    user: User = Depends(require_roles("student")),
):
    """
    Submits a project and auto-assigns the least-loaded mentor of the course.
    mentor_id stays null when the course has no mentor yet.
    """
    try:
        return submit_project(db, user, payload)
    except DuplicateSubmission as e:
        raise HTTPException(status_code=400, detail=str(e))
    except ConflictError as e:
        raise HTTPException(status_code=409, detail=str(e))


@router.get("/", response_model=List[ProjectOut])
def list_projects(
    search: Optional[str] = Query(None, description="Substring of title, team or leader"),
    db: Session = Depends(get_db),
    user: User = Depends(get_current_user),
):
    projects = db.query(Project).order_by(Project.created_at).all()
    return filter_visible(user.role, user.id, projects, search=search)


@router.get("/me", response_model=List[ProjectWithEvaluation])
def my_projects(db: Session = Depends(get_db), user: User = Depends(get_current_user)):
    projects = (
        db.query(Project)
        .filter(Project.student_id == user.id)
        .order_by(Project.created_at)
        .all()
    )
    if not projects:
        raise HTTPException(status_code=404, detail="No projects found")
    return projects


@router.get("/{project_id}", response_model=ProjectOut)
def get_project(project_id: str, db: Session = Depends(get_db), _: User = Depends(get_current_user)):
    project = db.get(Project, project_id)
    if not project:
        raise HTTPException(status_code=404, detail="Project not found")
    return project
