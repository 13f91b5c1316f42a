from typing import List, Optional
import logging
import uuid

from sqlalchemy.orm import Session

from socialnet.core.exceptions import Forbidden, NotFound
from socialnet.modules.auth.schemas.auth import Identity
from socialnet.modules.posts.models.post import Post
from socialnet.modules.posts.comments.models.comment import Comment
from socialnet.modules.posts.schemas.post import Post as PostSchema, PostCreate, PostUpdate
from socialnet.modules.posts.comments.schemas.comment import Comment as CommentSchema
from socialnet.modules.user_management.models.user import User
from socialnet.modules.user_management.schemas.user import UserSummary
from socialnet.modules.user_management.services.user import get_user_or_404

logger = logging.getLogger("socialnet")

def _summarize_user(user: Optional[User]) -> Optional[UserSummary]:
    # A reference to a deleted user renders as null
    if user is None:
        return None
    return UserSummary(id=user.id, name=user.name, profile_image_url=user.profile_image_url)

def _expand_comment(comment: Comment) -> CommentSchema:
    return CommentSchema(
        id=comment.id,
        text=comment.text,
        commented_by=_summarize_user(comment.author),
        created_at=comment.created_at,
        updated_at=comment.updated_at,
    )

def expand_post(post: Post) -> PostSchema:
    """Resolve author and commenters of a post into display fields"""
    return PostSchema(
        id=post.id,
        title=post.title,
        description=post.description,
        image_url=post.image_url,
        posted_by=_summarize_user(post.author),
        comments=[_expand_comment(comment) for comment in post.comments],
        likes=[like.user_id for like in post.likes],
        created_at=post.created_at,
        updated_at=post.updated_at,
    )

def get_post(db: Session, post_id: str) -> Optional[Post]:
    """Get post by ID"""
    return db.query(Post).filter(Post.id == post_id).first()

def get_post_or_404(db: Session, post_id: str) -> Post:
    post = get_post(db, post_id=post_id)
    if not post:
        raise NotFound("Post not found")
    return post

def get_posts(db: Session) -> List[Post]:
    """Get all posts, newest first"""
    return db.query(Post).order_by(Post.created_at.desc()).all()

def get_user_posts(db: Session, user_id: str) -> List[Post]:
    """Get posts by user ID"""
    return db.query(Post).filter(Post.posted_by == user_id).order_by(Post.created_at.desc()).all()

def check_owner_or_admin(owner_id: str, identity: Identity) -> None:
    if owner_id != identity.id and not identity.is_admin:
        raise Forbidden()

def create_post(db: Session, post_in: PostCreate, identity: Identity) -> Post:
    """Create new post owned by the caller, with no comments and no likes"""
    get_user_or_404(db, identity.id)

    post = Post(
        id=str(uuid.uuid4()),
        posted_by=identity.id,
        **post_in.model_dump(),
    )
    db.add(post)
    db.commit()
    db.refresh(post)
    logger.info(f"Created post {post.id} for user {identity.id}")
    return post

def update_post(db: Session, post: Post, post_in: PostUpdate, identity: Identity) -> Post:
    """Update post fields; only the owner or an admin may do so"""
    check_owner_or_admin(post.posted_by, identity)

    update_data = post_in.model_dump(exclude_unset=True)
    if update_data.get("title") is None:
        update_data.pop("title", None)

    for field, value in update_data.items():
        setattr(post, field, value)

    db.commit()
    db.refresh(post)
    return post

def delete_post(db: Session, post: Post, identity: Identity) -> None:
    """
    Delete post and all associated comments and likes
    """
    check_owner_or_admin(post.posted_by, identity)

    post_id = post.id
    db.delete(post)
    db.commit()
    logger.info(f"Deleted post {post_id}")
