from typing import Any

from fastapi import APIRouter, Depends, Path, status
from sqlalchemy.orm import Session

from socialnet.deps import get_db, get_current_identity
from socialnet.modules.auth.schemas.auth import Identity
from socialnet.modules.posts.schemas.post import Post as PostSchema
from socialnet.modules.posts.services.post import expand_post, get_post_or_404
from socialnet.modules.posts.comments.schemas.comment import CommentCreate, CommentUpdate
from socialnet.modules.posts.comments.services.comment import add_comment, edit_comment, delete_comment

router = APIRouter()

@router.post("", response_model=PostSchema, status_code=status.HTTP_201_CREATED)
def create_new_comment(
    *,
    db: Session = Depends(get_db),
    post_id: str = Path(..., description="The ID of the post to comment on"),
    comment_in: CommentCreate,
    identity: Identity = Depends(get_current_identity),
) -> Any:
    """Add a comment to a post and return the expanded post"""
    post = get_post_or_404(db, post_id)
    return expand_post(add_comment(db, post, comment_in, identity))

@router.put("/{comment_id}", response_model=PostSchema)
def update_comment_by_id(
    *,
    db: Session = Depends(get_db),
    post_id: str = Path(..., description="The ID of the post"),
    comment_id: str,
    comment_in: CommentUpdate,
    identity: Identity = Depends(get_current_identity),
) -> Any:
    """Edit your own comment"""
    post = get_post_or_404(db, post_id)
    return expand_post(edit_comment(db, post, comment_id, comment_in, identity))

@router.delete("/{comment_id}", response_model=PostSchema)
def delete_comment_by_id(
    *,
    db: Session = Depends(get_db),
    post_id: str = Path(..., description="The ID of the post"),
    comment_id: str,
    identity: Identity = Depends(get_current_identity),
) -> Any:
    """Delete your own comment, or any comment as an admin"""
    post = get_post_or_404(db, post_id)
    return expand_post(delete_comment(db, post, comment_id, identity))
