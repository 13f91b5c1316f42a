from sqlalchemy import Column, String, DateTime, ForeignKey
from sqlalchemy.sql import func

from socialnet.db.session import Base

class PostLike(Base):
    __tablename__ = "post_likes"

    # The composite key makes the likes of a post a set
    post_id = Column(String, ForeignKey("posts.id"), primary_key=True)
    user_id = Column(String, ForeignKey("users.id"), primary_key=True, index=True)
    created_at = Column(DateTime, default=func.now())
