from typing import Optional, List
from datetime import datetime
from pydantic import Field

from socialnet.core.schemas import APIModel
from socialnet.modules.user_management.schemas.user import UserSummary
from socialnet.modules.posts.comments.schemas.comment import Comment

class PostBase(APIModel):
    title: str = Field(..., min_length=1)
    description: Optional[str] = None
    image_url: Optional[str] = None

class PostCreate(PostBase):
    pass

class PostUpdate(APIModel):
    title: Optional[str] = Field(None, min_length=1)
    description: Optional[str] = None
    image_url: Optional[str] = None

class Post(PostBase):
    """Post model returned to client, with author and commenters expanded"""
    id: str
    posted_by: Optional[UserSummary] = None
    comments: List[Comment] = []
    likes: List[str] = []
    created_at: datetime
    updated_at: datetime

class PostDeleted(APIModel):
    message: str
