from sqlalchemy import Column, Integer, String, DateTime, Text, ForeignKey
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func

from socialnet.db.session import Base
from socialnet.modules.user_management.models.user import User

class Comment(Base):
    __tablename__ = "comments"

    id = Column(String, primary_key=True, index=True)
    text = Column(Text, nullable=False)
    commented_by = Column(String, ForeignKey("users.id"), index=True)
    post_id = Column(String, ForeignKey("posts.id"), index=True, nullable=False)
    # Insertion order within the owning post, maintained by Post.comments
    position = Column(Integer, nullable=False)
    created_at = Column(DateTime, default=func.now())
    updated_at = Column(DateTime, default=func.now(), onupdate=func.now())

    author = relationship(User, lazy="joined")
