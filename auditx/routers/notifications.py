from typing import List

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from auditx.database import get_db
from auditx.models.notification import Notification
from auditx.models.user import User
from auditx.schemas.admin import MessageResponse
from auditx.schemas.notification import NotificationCreate, NotificationOut
from auditx.utils.auth import get_current_user
from auditx.utils.notifications import notify

router = APIRouter(prefix="/api/notifications", tags=["Notifications"])


def _owned(db: Session, notification_id: str, user: User) -> Notification:
    note = db.get(Notification, notification_id)
    if not note:
        raise HTTPException(status_code=404, detail="Notification not found")
    if note.user_id != user.id:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Not authorized")
    return note


@router.get("/", response_model=List[NotificationOut])
def my_notifications(db: Session = Depends(get_db), user: User = Depends(get_current_user)):
    return (
        db.query(Notification)
        .filter(Notification.user_id == user.id)
        .order_by(Notification.created_at.desc())
        .all()
    )


@router.post("/", response_model=NotificationOut, status_code=status.HTTP_201_CREATED)
def create_notification(
    payload: NotificationCreate,
    db: Session = Depends(get_db),
    user: User = Depends(get_current_user),
):
    if not db.get(User, payload.user_id):
        raise HTTPException(status_code=404, detail="User not found")
    note = notify(db, payload.user_id, payload.title, payload.message, kind=payload.kind, sender_id=user.id)
    db.commit()
    db.refresh(note)
    return note


@router.put("/{notification_id}/read", response_model=NotificationOut)
def mark_as_read(notification_id: str, db: Session = Depends(get_db), user: User = Depends(get_current_user)):
    note = _owned(db, notification_id, user)
    note.read = True
    db.commit()
    db.refresh(note)
    return note


@router.delete("/{notification_id}", response_model=MessageResponse)
def delete_notification(notification_id: str, db: Session = Depends(get_db), user: User = Depends(get_current_user)):
    note = _owned(db, notification_id, user)
    db.delete(note)
    db.commit()
    return MessageResponse(message="Notification removed")
