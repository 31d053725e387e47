from datetime import date
from pydantic import BaseModel, model_validator
from typing import List, Optional

class CourseCreate(BaseModel):
    name: str
    title: str
    semester: Optional[str] = None

class CourseOut(BaseModel):
    id: str
    name: str
    title: str
    semester: Optional[str] = None
    batch: Optional[str] = None
    class Config:
        from_attributes = True

class CourseWithCount(CourseOut):
    student_count: int = 0

class EvaluationPeriodIn(BaseModel):
    title: str
    start_date: date
    end_date: date

    @model_validator(mode="after")
    def check_order(self):
        if self.end_date < self.start_date:
            raise ValueError("end_date must not be before start_date")
        return self

class EvaluationPeriodOut(BaseModel):
    title: str
    start_date: date
    end_date: date
    class Config:
        from_attributes = True

class ExtendDeadlineRequest(BaseModel):
    new_date: date

class MentorLoad(BaseModel):
    mentor_id: str
    name: str
    course_code: Optional[str] = None
    load: int

class AdminStats(BaseModel):
    total_students: int
    total_mentors: int
    total_projects: int
    evaluated_projects: int
    pending_projects: int
    unassigned_projects: int
    courses: int
    mentor_load: List[MentorLoad] = []

class MessageResponse(BaseModel):
    message: str
