from sqlalchemy import Column, String
from auditx.database import Base


class Course(Base):
    """
    Course offered in the evaluation cycle.
    `name` is the course code students submit against (e.g. PCS-693).
    """
    __tablename__ = "courses"

    id = Column(String, primary_key=True)
    name = Column(String, unique=True, index=True, nullable=False)
    title = Column(String, nullable=False)
    semester = Column(String, nullable=True)
    batch = Column(String, nullable=True)                 # year the course was created
