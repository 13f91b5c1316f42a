from typing import List, Optional
import logging
import uuid

from sqlalchemy import or_
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from socialnet.core.exceptions import DuplicateEmail, NotFound
from socialnet.core.security import get_password_hash
from socialnet.modules.user_management.models.user import User
from socialnet.modules.user_management.schemas.user import UserCreate, UserUpdate
# Models needed for the cascade on user deletion
from socialnet.modules.posts.models.post import Post
from socialnet.modules.posts.comments.models.comment import Comment
from socialnet.modules.posts.likes.models.like import PostLike

logger = logging.getLogger("socialnet")

def get_user(db: Session, user_id: str) -> Optional[User]:
    """Get user by ID"""
    return db.query(User).filter(User.id == user_id).first()

def get_user_by_email(db: Session, email: str) -> Optional[User]:
    """Get user by email"""
    return db.query(User).filter(User.email == email.lower()).first()

def get_users(db: Session) -> List[User]:
    """Get all users"""
    return db.query(User).order_by(User.created_at).all()

def get_user_or_404(db: Session, user_id: str) -> User:
    user = get_user(db, user_id=user_id)
    if not user:
        raise NotFound("User not found")
    return user

def _commit_unique_email(db: Session) -> None:
    # The unique index on users.email is the final word on duplicates
    try:
        db.commit()
    except IntegrityError:
        db.rollback()
        raise DuplicateEmail()

def create_user(db: Session, user_in: UserCreate) -> User:
    """Register a new, non-admin user"""
    if get_user_by_email(db, email=user_in.email):
        raise DuplicateEmail()

    user = User(
        id=str(uuid.uuid4()),
        name=user_in.name,
        email=user_in.email,
        hashed_password=get_password_hash(user_in.password),
        is_admin=False,
    )
    db.add(user)
    _commit_unique_email(db)
    db.refresh(user)
    logger.info(f"Registered user {user.id}")
    return user

def update_user(db: Session, user: User, user_in: UserUpdate) -> User:
    """Apply the fields present in user_in; a new password is rehashed"""
    update_data = user_in.model_dump(exclude_unset=True, exclude_none=True)

    # Handle password update separately to ensure proper hashing
    if "password" in update_data:
        update_data["hashed_password"] = get_password_hash(update_data.pop("password"))

    if "email" in update_data and update_data["email"] != user.email:
        if get_user_by_email(db, email=update_data["email"]):
            raise DuplicateEmail()

    for field, value in update_data.items():
        setattr(user, field, value)

    _commit_unique_email(db)
    db.refresh(user)
    return user

def delete_user(db: Session, user: User) -> int:
    """
    Delete a user together with everything that references them.

    The comments the user left on other posts go first, then the user's posts
    (with all their comments and likes) and remaining likes, then the user record.
    Everything happens in one transaction. Returns the number of posts removed.
    """
    user_id = user.id
    try:
        post_ids = [post_id for (post_id,) in db.query(Post.id).filter(Post.posted_by == user_id)]

        # Comments on other users' posts leave through the ordered collection
        # so the remaining positions are renumbered without gaps
        commented_posts = db.query(Post).filter(
            Post.posted_by != user_id,
            Post.id.in_(db.query(Comment.post_id).filter(Comment.commented_by == user_id)),
        ).all()
        for post in commented_posts:
            for comment in [c for c in post.comments if c.commented_by == user_id]:
                post.comments.remove(comment)
        db.flush()

        db.query(PostLike).filter(
            or_(PostLike.user_id == user_id, PostLike.post_id.in_(post_ids))
        ).delete(synchronize_session=False)
        db.query(Comment).filter(
            or_(Comment.commented_by == user_id, Comment.post_id.in_(post_ids))
        ).delete(synchronize_session=False)
        deleted_posts = db.query(Post).filter(Post.posted_by == user_id).delete(synchronize_session=False)

        # Finally delete the user
        db.delete(user)
        db.commit()
    except Exception as e:
        db.rollback()
        logger.error(f"Error deleting user {user_id}: {e}")
        raise

    logger.info(f"Deleted user {user_id} and {deleted_posts} of their posts")
    return deleted_posts
