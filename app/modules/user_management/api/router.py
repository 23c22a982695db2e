from typing import Any, List
import logging

from fastapi import APIRouter, Depends, HTTPException, status, Query
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from app.db.session import get_db
from app.modules.user_management.models.user import User
from app.modules.user_management.schemas.user import User as UserSchema, UserCreate, UserUpdate
from app.modules.user_management.services.user import (
    get_users, get_user, get_user_by_username, get_user_by_email, create_user, update_user, delete_user,
    posts_of, open_posts_of,
)
from app.modules.posts.schemas.post import Post as PostSchema


router = APIRouter()
logger = logging.getLogger("app")

def _validate_user(db: Session, user_id: str) -> User:
    """Validate user exists and return user object or raise HTTPException"""
    user = get_user(db, user_id=user_id)
    if not user:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="User not found",
        )
    return user

@router.post("", response_model=UserSchema, status_code=status.HTTP_201_CREATED)
def create_new_user(
    *,
    db: Session = Depends(get_db),
    user_in: UserCreate,
) -> Any:
    """Create a user"""
    if get_user_by_username(db, username=user_in.username):
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail="Username already taken",
        )
    if get_user_by_email(db, email=user_in.email):
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail="Email already registered",
        )
    return create_user(db, user_in)

@router.get("", response_model=List[UserSchema])
def read_users(
    db: Session = Depends(get_db),
    skip: int = Query(0, ge=0),
    limit: int = Query(50, ge=1, le=50),
) -> Any:
    """Retrieve users with pagination"""
    return get_users(db, skip=skip, limit=limit)

@router.get("/{user_id}", response_model=UserSchema)
def read_user_by_id(
    user_id: str,
    db: Session = Depends(get_db),
) -> Any:
    """Get a specific user by id"""
    return _validate_user(db, user_id)

@router.put("/{user_id}", response_model=UserSchema)
def update_user_by_id(
    *,
    db: Session = Depends(get_db),
    user_id: str,
    user_in: UserUpdate,
) -> Any:
    """Update a user"""
    user = _validate_user(db, user_id)
    try:
        return update_user(db, user, user_in)
    except IntegrityError:
        db.rollback()
        logger.warning(f"Refused to update user {user_id}: username or email already in use")
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail="Username or email already in use",
        )

@router.delete("/{user_id}", response_model=UserSchema)
def delete_user_by_id(
    *,
    db: Session = Depends(get_db),
    user_id: str,
) -> Any:
    """
    Delete a user. Fails with 409 while the user still owns posts.
    """
    user = _validate_user(db, user_id)
    deleted = UserSchema.model_validate(user)
    try:
        delete_user(db, user)
    except IntegrityError:
        db.rollback()
        logger.warning(f"Refused to delete user {user_id}: posts still reference it")
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail="User still owns posts",
        )
    return deleted

@router.get("/{user_id}/posts", response_model=List[PostSchema])
def read_user_owned_posts(
    *,
    db: Session = Depends(get_db),
    user_id: str,
    skip: int = Query(0, ge=0),
    limit: int = Query(20, ge=1, le=50),
) -> Any:
    """Get posts created by a specific user"""
    user = _validate_user(db, user_id)
    return posts_of(db, user).offset(skip).limit(limit).all()

@router.get("/{user_id}/open-posts", response_model=List[PostSchema])
def read_user_open_posts(
    *,
    db: Session = Depends(get_db),
    user_id: str,
    skip: int = Query(0, ge=0),
    limit: int = Query(20, ge=1, le=50),
) -> Any:
    """Get the open posts of a specific user"""
    user = _validate_user(db, user_id)
    return open_posts_of(db, user).offset(skip).limit(limit).all()
