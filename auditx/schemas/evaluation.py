from datetime import datetime
from pydantic import BaseModel, Field
from typing import Optional

class RubricMarks(BaseModel):
    """Fixed rubric, 100 marks in total."""
    viva: int = Field(ge=0, le=25, description="Viva performance, 0..25")
    code_quality: int = Field(ge=0, le=20, description="Code quality, 0..20")
    logic: int = Field(ge=0, le=20, description="Logic & implementation, 0..20")
    architecture: int = Field(ge=0, le=15, description="Architecture & design, 0..15")
    innovation: int = Field(ge=0, le=20, description="Innovation & creativity, 0..20")

    def total(self) -> int:
        return self.viva + self.code_quality + self.logic + self.architecture + self.innovation

class EvaluationCreate(BaseModel):
    project_id: str
    marks: RubricMarks
    feedback: Optional[str] = None

class EvaluationOut(BaseModel):
    id: str
    project_id: str
    student_id: str
    evaluator_id: str
    marks: RubricMarks
    total: int
    feedback: Optional[str] = None
    updated_at: datetime
    class Config:
        from_attributes = True

class BenchmarkOut(BaseModel):
    average: int
    total_projects: int

class VivaSessionCreate(BaseModel):
    title: str
    date: str
    time: str
    place: str
    kind: str = "Viva"
    student_count: int = Field(0, ge=0)

class VivaSessionOut(BaseModel):
    id: str
    title: str
    date: str
    time: str
    place: str
    kind: str
    status: str
    mentor_id: Optional[str] = None
    created_at: datetime
    invited_count: int = 0
    class Config:
        from_attributes = True
