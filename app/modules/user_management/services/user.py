from typing import List, Optional
import logging

from sqlalchemy import false
from sqlalchemy.orm import Query, Session

from app.core.errors import CapabilityMissing
from app.modules.posts.models.post import Post
from app.modules.user_management.models.user import User
from app.modules.user_management.schemas.user import UserCreate, UserUpdate

logger = logging.getLogger(__name__)

def get_user(db: Session, user_id: str) -> Optional[User]:
    """Get user by ID"""
    return db.query(User).filter(User.id == user_id).first()

def get_user_by_username(db: Session, username: str) -> Optional[User]:
    """Get user by username"""
    return db.query(User).filter(User.username == username).first()

def get_user_by_email(db: Session, email: str) -> Optional[User]:
    """Get user by email"""
    return db.query(User).filter(User.email == email.lower()).first()

def get_users(db: Session, skip: int = 0, limit: int = 100) -> List[User]:
    """Get list of users"""
    return db.query(User).offset(skip).limit(limit).all()

def create_user(db: Session, user_in: UserCreate) -> User:
    """Create new user"""
    logger.info(f"Creating user: {user_in.username}")
    user = User(**user_in.model_dump())
    db.add(user)
    db.commit()
    db.refresh(user)
    return user

def update_user(db: Session, user: User, user_in: UserUpdate) -> User:
    """Update user"""
    # Explicit nulls are ignored; every writable column except full_name is NOT NULL
    update_data = user_in.model_dump(exclude_unset=True, exclude_none=True)
    for field, value in update_data.items():
        setattr(user, field, value)

    db.commit()
    db.refresh(user)
    return user

def delete_user(db: Session, user: User) -> User:
    """
    Delete user. Posts are not removed; the posts.user_id foreign key
    rejects the delete while the user still owns any.
    """
    logger.info(f"Deleting user with ID: {user.id}")
    db.delete(user)
    db.commit()
    return user

def posts_of(db: Session, user: User) -> Query:
    """
    All posts whose user_id matches the user.

    The returned query runs each time it is iterated and carries no ordering.
    A user that has not been flushed yet has no id and gets an empty query.
    """
    if user.id is None:
        return db.query(Post).filter(false())
    return db.query(Post).filter(Post.user_id == user.id)

def open_posts_of(db: Session, user: User, post_model=Post) -> Query:
    """
    The user's posts narrowed by the post model's own "open" filter.

    Raises CapabilityMissing if the post model has no filter_open.
    """
    filter_open = getattr(post_model, "filter_open", None)
    if filter_open is None:
        raise CapabilityMissing(getattr(post_model, "__name__", repr(post_model)), "filter_open")
    return filter_open(posts_of(db, user))
