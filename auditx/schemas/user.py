from pydantic import BaseModel, EmailStr
from typing import Literal, Optional

class UserCreate(BaseModel):
    name: str
    email: EmailStr
    password: str
    role: Literal["student", "mentor", "admin"]
    course_code: Optional[str] = None

class UserResponse(BaseModel):
    id: str
    name: str
    email: EmailStr
    role: str
    course_code: Optional[str] = None
    class Config:
        from_attributes = True

class AuthResponse(UserResponse):
    token: str

class MentorOut(BaseModel):
    id: str
    name: str
    class Config:
        from_attributes = True
