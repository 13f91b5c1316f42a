from typing import Optional
from datetime import datetime
from pydantic import Field

from socialnet.core.schemas import APIModel, NormalizedEmail

class UserBase(APIModel):
    name: Optional[str] = Field(None, min_length=1)
    email: Optional[NormalizedEmail] = None
    profile_image_url: Optional[str] = None

class UserCreate(APIModel):
    name: str = Field(..., min_length=1)
    email: NormalizedEmail
    password: str = Field(..., min_length=1)

class UserUpdate(UserBase):
    password: Optional[str] = Field(None, min_length=1)

class User(APIModel):
    """User model returned to client, never carries the password hash"""
    id: str
    name: str
    email: str
    is_admin: bool
    profile_image_url: Optional[str] = None
    created_at: datetime
    updated_at: datetime

class UserSummary(APIModel):
    """Display fields used when a post or comment references a user"""
    id: str
    name: str
    profile_image_url: Optional[str] = None

class UserDeleted(APIModel):
    message: str
    deleted_posts: int
