import logging
from typing import List
from uuid import uuid4

from fastapi import APIRouter, Depends, HTTPException, status
from fastapi.security import OAuth2PasswordRequestForm
from sqlalchemy.orm import Session

from auditx.database import get_db
from auditx.models.course import Course
from auditx.models.user import User
from auditx.schemas.admin import CourseOut
from auditx.schemas.user import AuthResponse, MentorOut, UserCreate, UserResponse
from auditx.utils.auth import get_current_user, get_password_hash, verify_password

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/auth", tags=["auth"])


@router.get("/me", response_model=UserResponse)
def get_profile(user: User = Depends(get_current_user)):
    """
    Profile of the user behind the token.
    """
    return user


@router.post("/register", response_model=AuthResponse, status_code=status.HTTP_201_CREATED)
def register(payload: UserCreate, db: Session = Depends(get_db)):
    if db.query(User).filter(User.email == payload.email).first():
        raise HTTPException(status_code=400, detail="User already exists")

    user = User(
        id=str(uuid4()),
        name=payload.name,
        email=payload.email,
        password_hash=get_password_hash(payload.password),
        role=payload.role,
        course_code=payload.course_code if payload.role == "mentor" else None,
    )
    db.add(user)
    db.commit()
    db.refresh(user)
    logger.info("Registered %s as %s", user.email, user.role)

    return AuthResponse(
        id=user.id,
        name=user.name,
        email=user.email,
        role=user.role,
        course_code=user.course_code,
        token=user.id,
    )


@router.post("/token")
def login(form: OAuth2PasswordRequestForm = Depends(), db: Session = Depends(get_db)):
    """
    Simplified auth: the token is the user id.
    """
    user = db.query(User).filter(User.email == form.username).first()
    if not user or not verify_password(form.password, user.password_hash):
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Invalid credentials")

    return {"access_token": user.id, "token_type": "bearer"}


@router.get("/mentors", response_model=List[MentorOut])
def list_mentors(db: Session = Depends(get_db), _: User = Depends(get_current_user)):
    return db.query(User).filter(User.role == "mentor").order_by(User.name).all()


@router.get("/courses", response_model=List[CourseOut])
def public_courses(db: Session = Depends(get_db)):
    # open endpoint: students pick a course code on the submission form
    return db.query(Course).order_by(Course.name).all()
