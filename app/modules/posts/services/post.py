from typing import List, Optional
from sqlalchemy.orm import Session
import logging

from app.modules.posts.models.post import Post
from app.modules.posts.schemas.post import PostCreate, PostUpdate

logger = logging.getLogger(__name__)

def get_post(db: Session, post_id: str) -> Optional[Post]:
    """Get post by ID"""
    logger.info(f"Getting post with ID: {post_id}")
    return db.query(Post).filter(Post.id == post_id).first()

def get_posts(db: Session, skip: int = 0, limit: int = 20) -> List[Post]:
    """Get list of posts, newest first"""
    logger.info(f"Getting posts with skip={skip}, limit={limit}")
    return db.query(Post).order_by(Post.created_at.desc()).offset(skip).limit(limit).all()

def create_post(db: Session, post_in: PostCreate) -> Post:
    """Create new post"""
    logger.info(f"Creating post for user ID: {post_in.user_id}")
    post = Post(**post_in.model_dump())
    db.add(post)
    db.commit()
    db.refresh(post)
    return post

def update_post(db: Session, post: Post, post_in: PostUpdate) -> Post:
    """Update post"""
    logger.info(f"Updating post with ID: {post.id}")
    update_data = post_in.model_dump(exclude_unset=True, exclude_none=True)

    for field, value in update_data.items():
        setattr(post, field, value)

    db.commit()
    db.refresh(post)
    return post

def delete_post(db: Session, post: Post) -> Post:
    """Delete post"""
    logger.info(f"Deleting post with ID: {post.id}")
    db.delete(post)
    db.commit()
    return post
