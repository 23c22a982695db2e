import uuid

from sqlalchemy import Column, String, DateTime, Text, ForeignKey
from sqlalchemy.orm import Query
from sqlalchemy.sql import func

from app.db.session import Base

POST_STATUS_OPEN = "open"
POST_STATUS_CLOSED = "closed"
POST_STATUSES = (POST_STATUS_OPEN, POST_STATUS_CLOSED)


def _new_id() -> str:
    return str(uuid.uuid4())


class Post(Base):
    __tablename__ = "posts"

    id = Column(String, primary_key=True, index=True, default=_new_id)
    user_id = Column(String, ForeignKey("users.id"), nullable=False, index=True)
    content = Column(Text, nullable=False)
    status = Column(String, nullable=False, default=POST_STATUS_OPEN)
    created_at = Column(DateTime, default=func.now())
    updated_at = Column(DateTime, default=func.now(), onupdate=func.now())

    # No relationship() is declared; owner-side queries live in the user service

    @classmethod
    def filter_open(cls, query: Query) -> Query:
        """Narrow a post query to open posts"""
        return query.filter(cls.status == POST_STATUS_OPEN)
