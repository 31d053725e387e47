from datetime import datetime
from pydantic import BaseModel
from typing import Literal, Optional

class NotificationCreate(BaseModel):
    user_id: str
    title: str
    message: str
    kind: Literal["info", "warning", "success"] = "info"

class NotificationOut(BaseModel):
    id: str
    user_id: str
    sender_id: Optional[str] = None
    title: str
    message: str
    kind: str
    read: bool
    created_at: datetime
    class Config:
        from_attributes = True
