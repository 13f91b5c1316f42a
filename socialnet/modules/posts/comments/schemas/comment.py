from typing import Optional
from datetime import datetime
from pydantic import Field

from socialnet.core.schemas import APIModel
from socialnet.modules.user_management.schemas.user import UserSummary

class CommentCreate(APIModel):
    text: str = Field(..., min_length=1)

class CommentUpdate(APIModel):
    text: str = Field(..., min_length=1)

class Comment(APIModel):
    """Comment as embedded in an expanded post"""
    id: str
    text: str
    commented_by: Optional[UserSummary] = None
    created_at: datetime
    updated_at: datetime
