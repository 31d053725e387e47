from datetime import datetime
from sqlalchemy import Column, String, Boolean, DateTime, ForeignKey, JSON, UniqueConstraint
from sqlalchemy.orm import relationship
from auditx.database import Base


class Project(Base):
    __tablename__ = "projects"

    id = Column(String, primary_key=True, index=True)

    student_id = Column(String, ForeignKey("users.id"), nullable=False, index=True)
    student = relationship("User", foreign_keys=[student_id], back_populates="submitted_projects")

    team_name = Column(String, nullable=False)
    leader_name = Column(String, nullable=False)
    members = Column(JSON, nullable=False, default=list)
    repo_link = Column(String, nullable=False)
    title = Column(String, nullable=False)
    description = Column(String, nullable=False)
    domain = Column(String, nullable=False)
    tech_stack = Column(String, nullable=False)

    course_code = Column(String, nullable=False, index=True)
    subject_name = Column(String, nullable=True)
    semester = Column(String, nullable=False)
    academic_year = Column(String, nullable=False)

    # set once by the assignment engine; only the admin override rewrites it
    mentor_id = Column(String, ForeignKey("users.id"), nullable=True, index=True)
    mentor = relationship("User", foreign_keys=[mentor_id], back_populates="assigned_projects")

    analyzed = Column(Boolean, default=False, nullable=False)
    created_at = Column(DateTime, default=datetime.utcnow, nullable=False)

    viva_date = Column(String, nullable=True)
    viva_time = Column(String, nullable=True)
    viva_place = Column(String, nullable=True)

    evaluation = relationship(
        "Evaluation", back_populates="project", uselist=False, cascade="all, delete-orphan"
    )

    __table_args__ = (
        UniqueConstraint("student_id", "course_code", name="uq_project_student_course"),
    )
