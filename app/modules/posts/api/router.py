from typing import Any, List
import logging

from fastapi import APIRouter, Depends, HTTPException, status, Query
from sqlalchemy.orm import Session

from app.db.session import get_db
from app.modules.posts.schemas.post import Post as PostSchema, PostCreate, PostUpdate
from app.modules.posts.services.post import (
    get_post, get_posts, create_post, update_post, delete_post
)
from app.modules.user_management.services.user import get_user

logger = logging.getLogger(__name__)

router = APIRouter(prefix="")

def _validate_post(db: Session, post_id: str):
    post = get_post(db, post_id=post_id)
    if not post:
        logger.info(f"Post {post_id} not found")
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Post not found",
        )
    return post

@router.get("", response_model=List[PostSchema])
def read_posts(
    db: Session = Depends(get_db),
    skip: int = Query(0, ge=0),
    limit: int = Query(20, ge=1, le=200),
) -> Any:
    """
    Retrieve posts, newest first.
    """
    return get_posts(db, skip=skip, limit=limit)

@router.post("", response_model=PostSchema, status_code=status.HTTP_201_CREATED)
def create_new_post(
    *,
    db: Session = Depends(get_db),
    post_in: PostCreate,
) -> Any:
    """
    Create a post owned by an existing user.
    """
    if not get_user(db, user_id=post_in.user_id):
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="User not found",
        )
    return create_post(db, post_in)

@router.get("/{post_id}", response_model=PostSchema)
def read_post_by_id(
    *,
    db: Session = Depends(get_db),
    post_id: str,
) -> Any:
    """
    Get post by ID.
    """
    return _validate_post(db, post_id)

@router.put("/{post_id}", response_model=PostSchema)
def update_post_by_id(
    *,
    db: Session = Depends(get_db),
    post_id: str,
    post_in: PostUpdate,
) -> Any:
    """
    Update a post's content or status.
    """
    post = _validate_post(db, post_id)
    return update_post(db, post, post_in)

@router.delete("/{post_id}", response_model=PostSchema)
def delete_post_by_id(
    *,
    db: Session = Depends(get_db),
    post_id: str,
) -> Any:
    """
    Delete a post.
    """
    post = _validate_post(db, post_id)
    # Serialize before the commit expires the instance
    deleted = PostSchema.model_validate(post)
    delete_post(db, post)
    return deleted
