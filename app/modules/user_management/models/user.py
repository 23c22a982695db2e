import uuid

from sqlalchemy import Boolean, Column, String, DateTime
from sqlalchemy.sql import func

from app.db.session import Base


def _new_id() -> str:
    return str(uuid.uuid4())


class User(Base):
    __tablename__ = "users"

    # Assigned on flush, so a transient User() has id None
    id = Column(String, primary_key=True, index=True, default=_new_id)
    email = Column(String, unique=True, index=True, nullable=False)
    username = Column(String, unique=True, index=True, nullable=False)
    full_name = Column(String, nullable=True)
    is_active = Column(Boolean, default=True)
    created_at = Column(DateTime, default=func.now())
    updated_at = Column(DateTime, default=func.now(), onupdate=func.now())
