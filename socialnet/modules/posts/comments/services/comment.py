from typing import Optional
import logging
import uuid

from sqlalchemy.orm import Session

from socialnet.core.exceptions import Forbidden, NotFound
from socialnet.modules.auth.schemas.auth import Identity
from socialnet.modules.posts.models.post import Post
from socialnet.modules.posts.comments.models.comment import Comment
from socialnet.modules.posts.comments.schemas.comment import CommentCreate, CommentUpdate
from socialnet.modules.user_management.services.user import get_user_or_404

logger = logging.getLogger("socialnet")

def find_comment(post: Post, comment_id: str) -> Optional[Comment]:
    """Look a comment up by identity within its post"""
    return next((comment for comment in post.comments if comment.id == comment_id), None)

def get_comment_or_404(post: Post, comment_id: str) -> Comment:
    comment = find_comment(post, comment_id)
    if not comment:
        raise NotFound("Comment not found")
    return comment

def add_comment(db: Session, post: Post, comment_in: CommentCreate, identity: Identity) -> Post:
    """Append a comment by the caller to the end of the post's comments"""
    get_user_or_404(db, identity.id)

    post.comments.append(
        Comment(
            id=str(uuid.uuid4()),
            text=comment_in.text,
            commented_by=identity.id,
        )
    )
    db.commit()
    db.refresh(post)
    return post

def edit_comment(db: Session, post: Post, comment_id: str, comment_in: CommentUpdate, identity: Identity) -> Post:
    """Replace the text of a comment; only its author may do so"""
    comment = get_comment_or_404(post, comment_id)
    if comment.commented_by != identity.id:
        raise Forbidden()

    comment.text = comment_in.text
    db.commit()
    db.refresh(post)
    return post

def delete_comment(db: Session, post: Post, comment_id: str, identity: Identity) -> Post:
    """Remove a comment by identity; allowed for its author or an admin"""
    comment = get_comment_or_404(post, comment_id)
    if comment.commented_by != identity.id and not identity.is_admin:
        raise Forbidden()

    post.comments.remove(comment)
    db.commit()
    db.refresh(post)
    logger.info(f"Deleted comment {comment_id} from post {post.id}")
    return post
