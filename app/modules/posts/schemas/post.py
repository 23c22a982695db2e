from typing import Literal, Optional
from datetime import datetime
from pydantic import BaseModel, ConfigDict

PostStatus = Literal["open", "closed"]

class PostBase(BaseModel):
    content: str
    status: PostStatus = "open"

class PostCreate(PostBase):
    user_id: str

class PostUpdate(BaseModel):
    content: Optional[str] = None
    status: Optional[PostStatus] = None

class PostInDBBase(PostBase):
    model_config = ConfigDict(from_attributes=True)

    id: str
    user_id: str
    created_at: datetime
    updated_at: datetime

class Post(PostInDBBase):
    """Post model returned to client"""
    pass
