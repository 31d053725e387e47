from datetime import datetime
from sqlalchemy import Column, String, Integer, DateTime, ForeignKey, JSON
from sqlalchemy.orm import relationship
from auditx.database import Base


class Evaluation(Base):
    __tablename__ = "evaluations"

    id = Column(String, primary_key=True)

    # 1:1 with the project
    project_id = Column(String, ForeignKey("projects.id"), unique=True, nullable=False)
    project = relationship("Project", back_populates="evaluation")

    student_id = Column(String, ForeignKey("users.id"), nullable=False)
    evaluator_id = Column(String, ForeignKey("users.id"), nullable=False)

    marks = Column(JSON, nullable=False)
    total = Column(Integer, nullable=False)
    feedback = Column(String, nullable=True)

    created_at = Column(DateTime, default=datetime.utcnow, nullable=False)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow, nullable=False)
