from sqlalchemy import Column, String
from sqlalchemy.orm import relationship
from auditx.database import Base

ROLES = ("student", "mentor", "admin")


class User(Base):
    __tablename__ = "users"

    id = Column(String, primary_key=True, index=True)
    name = Column(String, nullable=False)
    email = Column(String, unique=True, index=True, nullable=False)
    password_hash = Column(String, nullable=False)

    role = Column(String, nullable=False, index=True)  # student | mentor | admin
    # mentors only: the course they can be auto-assigned for
    course_code = Column(String, nullable=True)

    submitted_projects = relationship(
        "Project", foreign_keys="Project.student_id", back_populates="student"
    )
    assigned_projects = relationship(
        "Project", foreign_keys="Project.mentor_id", back_populates="mentor"
    )
