from datetime import datetime
from sqlalchemy import Column, String, Date, DateTime, ForeignKey
from auditx.database import Base


class EvaluationPeriod(Base):
    """Single-row setting: the currently announced evaluation window."""
    __tablename__ = "evaluation_periods"

    id = Column(String, primary_key=True)
    title = Column(String, nullable=False)
    start_date = Column(Date, nullable=False)
    end_date = Column(Date, nullable=False)


class VivaSession(Base):
    __tablename__ = "viva_sessions"

    id = Column(String, primary_key=True)
    title = Column(String, nullable=False)
    date = Column(String, nullable=False)
    time = Column(String, nullable=False)
    place = Column(String, nullable=False)
    kind = Column(String, nullable=False, default="Viva")
    status = Column(String, nullable=False, default="Scheduled")

    mentor_id = Column(String, ForeignKey("users.id"), nullable=True)
    created_at = Column(DateTime, default=datetime.utcnow, nullable=False)
