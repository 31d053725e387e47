from datetime import datetime
from sqlalchemy import Column, String, Boolean, DateTime, ForeignKey
from auditx.database import Base


class Notification(Base):
    __tablename__ = "notifications"

    id = Column(String, primary_key=True)
    user_id = Column(String, ForeignKey("users.id"), nullable=False, index=True)
    sender_id = Column(String, ForeignKey("users.id"), nullable=True)

    title = Column(String, nullable=False)
    message = Column(String, nullable=False)
    kind = Column(String, nullable=False, default="info")  # info | warning | success
    read = Column(Boolean, default=False, nullable=False)

    created_at = Column(DateTime, default=datetime.utcnow, nullable=False)
