import logging

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from socialnet.modules.auth.schemas.auth import Identity
from socialnet.modules.posts.models.post import Post
from socialnet.modules.posts.likes.models.like import PostLike
from socialnet.modules.posts.services.post import get_post_or_404
from socialnet.modules.user_management.services.user import get_user_or_404

logger = logging.getLogger("socialnet")

def toggle_like(db: Session, post: Post, identity: Identity) -> Post:
    """
    Like the post if the caller has not, otherwise take the like back.

    Removal is a single DELETE and addition a single INSERT on the
    (post_id, user_id) key, so the likes set never holds a duplicate. Two
    toggles racing each other can still leave either state.
    """
    get_user_or_404(db, identity.id)

    removed = (
        db.query(PostLike)
        .filter(PostLike.post_id == post.id, PostLike.user_id == identity.id)
        .delete(synchronize_session=False)
    )
    if removed:
        db.commit()
    else:
        post_id = post.id
        db.add(PostLike(post_id=post_id, user_id=identity.id))
        try:
            db.commit()
        except IntegrityError:
            db.rollback()
            # A foreign-key failure means the post or the user went away meanwhile
            post = get_post_or_404(db, post_id)
            get_user_or_404(db, identity.id)
            logger.warning(f"Concurrent like on post {post_id} by user {identity.id}")

    db.refresh(post)
    return post
