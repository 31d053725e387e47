import logging
import os
from uuid import uuid4

from fastapi import FastAPI
from sqlalchemy.orm import Session

from auditx.database import Base, engine
from auditx.models.user import User
from auditx.routers import (
    admin as admin_router,
    auth as auth_router,
    evaluations as evaluation_router,
    notifications as notification_router,
    projects as project_router,
)
from auditx.utils.auth import get_password_hash

logging.basicConfig(
    level=os.getenv("LOG_LEVEL", "INFO").upper(),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger("auditx")

ADMIN_EMAIL = os.getenv("ADMIN_EMAIL", "admin@auditx.com")
ADMIN_PASSWORD = os.getenv("ADMIN_PASSWORD", "123456")
ADMIN_NAME = os.getenv("ADMIN_NAME", "Admin User")


def rehash_plain_passwords(db: Session) -> int:
    """Rows imported by hand may carry raw passwords; bcrypt hashes start with "$2b$"."""
    updated = 0
    for u in db.query(User).all():
        if not u.password_hash.startswith("$2b$"):
            logger.info("Hashing raw password of %s", u.email)
            u.password_hash = get_password_hash(u.password_hash)
            updated += 1
    if updated:
        db.commit()
        logger.info("Re-hashed %d passwords", updated)
    return updated


def seed_admin(db: Session) -> None:
    if db.query(User).filter(User.email == ADMIN_EMAIL).first():
        return
    db.add(User(
        id=str(uuid4()),
        name=ADMIN_NAME,
        email=ADMIN_EMAIL,
        password_hash=get_password_hash(ADMIN_PASSWORD),
        role="admin",
    ))
    db.commit()
    logger.info("Seeded admin user %s", ADMIN_EMAIL)


app = FastAPI(title="AuditX")
Base.metadata.create_all(bind=engine)

with Session(engine) as db:
    rehash_plain_passwords(db)
    seed_admin(db)

app.include_router(auth_router.router)
app.include_router(project_router.router)
app.include_router(evaluation_router.router)
app.include_router(admin_router.router)
app.include_router(notification_router.router)


@app.get("/")
def root():
    return {"message": "AuditX API is running"}


if __name__ == "__main__":
    import uvicorn
    uvicorn.run("auditx.main:app", host="127.0.0.1", port=int(os.getenv("PORT", "5001")), reload=True)
