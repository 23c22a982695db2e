from typing import Optional
from datetime import datetime
from pydantic import BaseModel, ConfigDict, EmailStr, field_validator

class UserBase(BaseModel):
    email: Optional[EmailStr] = None
    username: Optional[str] = None
    full_name: Optional[str] = None

    @field_validator("email")
    @classmethod
    def _normalize_email(cls, v: Optional[str]) -> Optional[str]:
        return v.lower() if v else None

class UserCreate(UserBase):
    email: EmailStr
    username: str

class UserUpdate(UserBase):
    is_active: Optional[bool] = None

class UserInDBBase(UserBase):
    model_config = ConfigDict(from_attributes=True)

    id: str
    is_active: bool
    created_at: datetime
    updated_at: datetime

class User(UserInDBBase):
    """User model returned to client"""
    pass
