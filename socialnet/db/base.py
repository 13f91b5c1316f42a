# Import all models here so Base.metadata knows every table
from socialnet.db.session import Base

from socialnet.modules.user_management.models.user import User
from socialnet.modules.posts.models.post import Post
from socialnet.modules.posts.comments.models.comment import Comment
from socialnet.modules.posts.likes.models.like import PostLike
