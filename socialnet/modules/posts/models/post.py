from sqlalchemy import Column, String, DateTime, Text, ForeignKey
from sqlalchemy.ext.orderinglist import ordering_list
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func

from socialnet.db.session import Base
from socialnet.modules.user_management.models.user import User
from socialnet.modules.posts.comments.models.comment import Comment
from socialnet.modules.posts.likes.models.like import PostLike

class Post(Base):
    __tablename__ = "posts"

    id = Column(String, primary_key=True, index=True)
    title = Column(String, nullable=False)
    description = Column(Text, nullable=True)
    image_url = Column(String, nullable=True)
    posted_by = Column(String, ForeignKey("users.id"), index=True, nullable=False)
    created_at = Column(DateTime, default=func.now())
    updated_at = Column(DateTime, default=func.now(), onupdate=func.now())

    author = relationship(User, lazy="joined")
    # Owned, ordered collection; comments are addressed by id, never by index
    comments = relationship(
        Comment,
        order_by=Comment.position,
        collection_class=ordering_list("position"),
        cascade="all, delete-orphan",
    )
    likes = relationship(PostLike, order_by=PostLike.created_at, cascade="all, delete-orphan")
