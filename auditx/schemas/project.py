from datetime import datetime
from pydantic import BaseModel, Field
from typing import List, Optional

from auditx.schemas.evaluation import EvaluationOut

class ProjectCreate(BaseModel):
    team_name: str = Field(min_length=1)
    leader_name: str = Field(min_length=1)
    members: List[str] = []
    repo_link: str = Field(min_length=1)
    title: str = Field(min_length=1)
    description: str = Field(min_length=1)
    domain: str = Field(min_length=1)
    tech_stack: str = Field(min_length=1)
    course_code: str = Field(min_length=1)
    subject_name: Optional[str] = None
    semester: str = Field(min_length=1)
    academic_year: str = Field(min_length=1)

class ProjectOut(BaseModel):
    id: str
    student_id: str
    team_name: str
    leader_name: str
    members: List[str] = []
    repo_link: str
    title: str
    description: str
    domain: str
    tech_stack: str
    course_code: str
    subject_name: Optional[str] = None
    semester: str
    academic_year: str
    mentor_id: Optional[str] = None
    analyzed: bool
    created_at: datetime
    viva_date: Optional[str] = None
    viva_time: Optional[str] = None
    viva_place: Optional[str] = None
    class Config:
        from_attributes = True

class ProjectWithEvaluation(ProjectOut):
    evaluation: Optional[EvaluationOut] = None

class AssignMentorRequest(BaseModel):
    project_id: str
    mentor_id: str
