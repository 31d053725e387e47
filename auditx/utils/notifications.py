from __future__ import annotations

import logging
from datetime import date, datetime
from typing import Iterable, Optional
from uuid import uuid4

from sqlalchemy.orm import Session

from auditx.models.notification import Notification
from auditx.models.user import User

logger = logging.getLogger(__name__)

KINDS = ("info", "warning", "success")


def format_date(value: date | datetime | str) -> str:
    """DD/MM/YYYY, the format used in every notification text."""
    if isinstance(value, str):
        value = date.fromisoformat(value[:10])
    return value.strftime("%d/%m/%Y")


def notify(
    db: Session,
    user_id: str,
    title: str,
    message: str,
    kind: str = "info",
    sender_id: Optional[str] = None,
) -> Notification:
    """
    Fire-and-forget sink: adds the notification to the current session.
    The caller commits together with the change that triggered it.
    """
    note = Notification(
        id=str(uuid4()),
        user_id=user_id,
        sender_id=sender_id,
        title=title,
        message=message,
        kind=kind if kind in KINDS else "info",
        read=False,
        created_at=datetime.utcnow(),
    )
    db.add(note)
    return note


def broadcast(
    db: Session,
    users: Iterable[User],
    title: str,
    message: str,
    kind: str = "info",
    sender_id: Optional[str] = None,
) -> int:
    sent = 0
    for u in users:
        notify(db, u.id, title, message, kind=kind, sender_id=sender_id)
        sent += 1
    logger.info("Broadcast '%s' to %d users", title, sent)
    return sent
